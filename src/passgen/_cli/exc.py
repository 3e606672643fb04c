import pathlib
from dataclasses import dataclass

import click
from typing_extensions import override


@dataclass(slots=True)
class CLIError(click.ClickException):
    """
    Error shown to the user as ``Error: <message>`` before passgen exits with
    ``exit_code``: 1 for rejected input, 128 for anything unexpected.
    """

    message: str
    exit_code: int = 1

    def __post_init__(self) -> None:
        # the generated __init__ skips ClickException's, which sets show_color
        click.ClickException.__init__(self, self.message)


@dataclass(slots=True, kw_only=True)
class ConfigSyntaxError(CLIError):
    """Raised when the ``--config`` file is not valid YAML."""

    filename: pathlib.Path

    @override
    def format_message(self) -> str:
        return "Could not parse passgen settings file %r.\n\n%s" % (
            str(self.filename),
            self.message,
        )


@dataclass(slots=True)
class ConfigValidationError(CLIError):
    """
    Raised when the settings file or the ``PASSGEN_*`` environment holds values
    passgen can't use, such as a length outside 1-20 or an unknown key.
    """

    @override
    def format_message(self) -> str:
        return "Invalid passgen settings.\n\n%s" % self.message
