#!/usr/bin/env python3
"""nscale CLI entrypoint: print an N-step equal-tempered frequency table.

usage: nscale [-m] [-i] N startVal [outfile.txt]
  -m       startVal is a MIDI note number (0-127) instead of a frequency in Hz
  -i       also print the ratio of each step to the base frequency
  outfile  optional text file that receives the same table at 6 decimals
"""

from __future__ import annotations

import sys
from typing import List, Optional, Tuple

from nscale.io.output import ScaleWriter
from nscale.scale.errors import USAGE, InsufficientArguments, ScaleError, UnexpectedArguments, UnrecognizedOption
from nscale.scale.generator import scale_for
from nscale.scale.types import ScaleParameters
from nscale.scale.validation import build_parameters
from nscale.util.exit_codes import ExitCode
from nscale.util.logging import configure_logging, get_logger

logger = get_logger(__name__)


def scan_flags(argv: List[str]) -> Tuple[bool, bool, List[str]]:
    """Consume leading ``-m``/``-i`` flags; return (is_midi, show_interval, rest).

    Only the second character of a flag token is inspected. Scanning stops at
    the first token that does not start with ``-``.
    """
    is_midi = False
    show_interval = False
    idx = 0
    while idx < len(argv):
        token = argv[idx]
        if not token.startswith("-"):
            break
        option = token[1:2]
        if option == "m":
            is_midi = True
        elif option == "i":
            show_interval = True
        else:
            raise UnrecognizedOption(token)
        idx += 1
    return is_midi, show_interval, argv[idx:]


def parse_args(argv: Optional[List[str]] = None) -> ScaleParameters:
    if argv is None:
        argv = sys.argv[1:]

    is_midi, show_interval, positional = scan_flags(list(argv))
    if len(positional) < 2:
        raise InsufficientArguments(len(positional))
    if len(positional) > 3:
        raise UnexpectedArguments(positional[3:])

    output_path = positional[2] if len(positional) == 3 else None
    return build_parameters(
        positional[0],
        positional[1],
        is_midi=is_midi,
        show_interval=show_interval,
        output_path=output_path,
    )


def run(params: ScaleParameters) -> int:
    """Generate the table and write it; file problems never change the exit code."""
    entries = scale_for(params)
    logger.debug(
        "generated %d entries (notes=%d, midi=%s, base=%.6f Hz)",
        len(entries),
        params.notes,
        params.is_midi,
        entries[0].frequency_hz,
    )
    with ScaleWriter.for_path(params.show_interval, params.output_path) as writer:
        writer.write_all(entries)
    return ExitCode.SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    try:
        params = parse_args(argv)
    except ScaleError as exc:
        if exc.show_usage:
            print(exc)
            print(USAGE)
        else:
            print(f"error: {exc}")
        return exc.exit_code
    return run(params)


if __name__ == "__main__":
    sys.exit(main())
