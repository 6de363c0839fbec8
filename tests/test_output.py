import io

import pytest

from nscale.io.output import ScaleWriter, format_entry, open_output_file
from nscale.scale.generator import generate_scale
from nscale.scale.types import ScaleEntry


class _FailingFile(io.StringIO):
    """Accepts ``ok_writes`` writes, then raises like a full disk."""

    def __init__(self, ok_writes: int):
        super().__init__()
        self.ok_writes = ok_writes
        self.calls = 0

    def write(self, s: str) -> int:
        self.calls += 1
        if self.calls > self.ok_writes:
            raise OSError(28, "No space left on device")
        return super().write(s)


def test_format_entry_console_and_file_precision() -> None:
    entry = ScaleEntry(step_index=3, ratio_from_base=1.189207115, frequency_hz=523.2511306)
    assert format_entry(entry, show_interval=False) == "3:\t523.251 Hz"
    assert format_entry(entry, show_interval=True) == "3:\t1.189\t523.251 Hz"
    assert format_entry(entry, show_interval=True, precision=6) == "3:\t1.189207\t523.251131 Hz"


def test_open_output_file_returns_none_for_missing_directory(tmp_path, capsys) -> None:
    from nscale.util.logging import configure_logging

    configure_logging()
    assert open_output_file(str(tmp_path / "missing" / "out.txt")) is None
    assert open_output_file(None) is None
    assert "WARNING: unable to create file" in capsys.readouterr().err


def test_writer_mirrors_table_to_file(tmp_path) -> None:
    path = tmp_path / "table.txt"
    console = io.StringIO()
    entries = generate_scale(2, 100.0)
    with ScaleWriter.for_path(True, str(path), console=console) as writer:
        writer.write_all(entries)
    assert console.getvalue().splitlines() == [
        "0:\t1.000\t100.000 Hz",
        "1:\t1.414\t141.421 Hz",
        "2:\t2.000\t200.000 Hz",
    ]
    assert path.read_text(encoding="utf-8").splitlines() == [
        "0:\t1.000000\t100.000000 Hz",
        "1:\t1.414214\t141.421356 Hz",
        "2:\t2.000000\t200.000000 Hz",
    ]


def test_file_and_console_hold_the_same_values(tmp_path) -> None:
    path = tmp_path / "table.txt"
    console = io.StringIO()
    with ScaleWriter.for_path(False, str(path), console=console) as writer:
        writer.write_all(generate_scale(19, 311.127))
    file_lines = path.read_text(encoding="utf-8").splitlines()
    console_lines = console.getvalue().splitlines()
    assert len(file_lines) == len(console_lines) == 20
    for f_line, c_line in zip(file_lines, console_lines):
        f_idx, f_val = f_line.split(":\t")
        c_idx, c_val = c_line.split(":\t")
        assert f_idx == c_idx
        assert float(f_val.split()[0]) == pytest.approx(float(c_val.split()[0]), abs=5.01e-4)


def test_write_failure_stops_file_but_not_console(capsys) -> None:
    from nscale.util.logging import configure_logging

    configure_logging()
    console = io.StringIO()
    failing = _FailingFile(ok_writes=2)
    with ScaleWriter(False, console=console, outfile=failing, path="disk.txt") as writer:
        writer.write_all(generate_scale(12, 440.0))
        assert not writer.file_ok
    assert len(console.getvalue().splitlines()) == 13
    assert failing.calls == 3
    assert isinstance(writer.write_error, OSError)
    assert "error writing the file disk.txt" in capsys.readouterr().err


def test_writer_without_file_only_writes_console() -> None:
    console = io.StringIO()
    writer = ScaleWriter(False, console=console)
    writer.write_all(generate_scale(1, 50.0))
    writer.close()
    assert console.getvalue() == "0:\t50.000 Hz\n1:\t100.000 Hz\n"
    assert writer.write_error is None
