"""Exit codes of the tweaks command."""

from typing import Optional

import typer

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_BAD_INPUT = 2  # unknown tweak, unparsable value, bad setup module or config
EXIT_USER_CANCEL = 130


class CliExit(typer.Exit):
    """typer.Exit that echoes its message first (to stderr unless the code is 0)."""

    def __init__(self, code: int, message: Optional[str] = None):
        self.message = message
        super().__init__(code)
        if message:
            typer.echo(message, err=code != EXIT_SUCCESS)

    @classmethod
    def error(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_ERROR, message)

    @classmethod
    def bad_input(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_BAD_INPUT, message)
