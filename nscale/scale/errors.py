"""Fatal argument and validation errors raised before any table is produced."""

from __future__ import annotations

from nscale.util.exit_codes import ExitCode

USAGE = "usage: nscale [-m] [-i] N startVal [outfile.txt]"


class ScaleError(ValueError):
    """Base class for errors that abort the run with a non-zero exit code."""

    exit_code: int = ExitCode.INVALID_ARGS
    show_usage: bool = False


class UnrecognizedOption(ScaleError):
    def __init__(self, token: str):
        super().__init__(f"unrecognized option {token}")
        self.token = token


class InsufficientArguments(ScaleError):
    show_usage = True

    def __init__(self, count: int):
        super().__init__("insufficient arguments")
        self.count = count


class UnexpectedArguments(ScaleError):
    show_usage = True

    def __init__(self, extra: list):
        super().__init__(f"unexpected arguments: {' '.join(extra)}")
        self.extra = list(extra)


class InvalidNumber(ScaleError):
    def __init__(self, name: str, text: str):
        super().__init__(f"{name} must be a number, got '{text}'.")
        self.name = name
        self.text = text


class NotesOutOfRange(ScaleError):
    def __init__(self, notes: int):
        super().__init__("N out of range. Must be between 1 and 24.")
        self.notes = notes


class MidiOutOfRange(ScaleError):
    def __init__(self, value: float):
        super().__init__("MIDI startVal must be <= 127.")
        self.value = value


class NonPositiveFrequency(ScaleError):
    def __init__(self, value: float):
        super().__init__("frequency startVal must be positive.")
        self.value = value
