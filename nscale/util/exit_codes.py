"""Documented exit codes for the nscale CLI.

Exit codes follow UNIX conventions:
- 0: Success, including runs where the optional output file could not be
  created or written (those failures are reported but non-fatal)
- 1: Invalid command-line arguments or parameter values

Usage:
    from nscale.util.exit_codes import ExitCode
    sys.exit(ExitCode.INVALID_ARGS)
"""

from __future__ import annotations


class ExitCode:
    """Exit code constants for nscale processes.

    Attributes:
        SUCCESS: Normal termination; the table was printed.
        INVALID_ARGS: Argument scanning or parameter validation failed.
    """

    SUCCESS: int = 0
    INVALID_ARGS: int = 1

    @classmethod
    def message(cls, code: int) -> str:
        """Return a human-readable message for an exit code."""
        messages = {
            cls.SUCCESS: "Success",
            cls.INVALID_ARGS: "Invalid arguments",
        }
        return messages.get(code, f"Unknown exit code {code}")
