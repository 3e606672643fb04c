from typing import Any, Callable, TypeVar

import click

from ..dto import MAX_LENGTH, MIN_LENGTH

F = TypeVar("F", bound=Callable[..., Any])


def config_options(fn: F) -> F:
    """
    Attaches the length and character-class options shared by every command.
    Options left unset resolve to None so the configuration layer can fill them.
    """
    for option in reversed(
        (
            click.option(
                "-l",
                "--length",
                type=click.IntRange(MIN_LENGTH, MAX_LENGTH),
                default=None,
                help="Password length (%d-%d)." % (MIN_LENGTH, MAX_LENGTH),
            ),
            click.option(
                "--uppercase/--no-uppercase",
                "include_uppercase",
                default=None,
                help="Include uppercase letters (A-Z).",
            ),
            click.option(
                "--lowercase/--no-lowercase",
                "include_lowercase",
                default=None,
                help="Include lowercase letters (a-z).",
            ),
            click.option(
                "--numbers/--no-numbers",
                "include_numbers",
                default=None,
                help="Include digits (1-9).",
            ),
            click.option(
                "--symbols/--no-symbols",
                "include_symbols",
                default=None,
                help="Include symbols.",
            ),
        )
    ):
        fn = option(fn)
    return fn
