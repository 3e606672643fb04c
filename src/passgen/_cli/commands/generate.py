import asyncio
import random
from logging import getLogger
from typing import NoReturn

import click
import pydantic

from ... import _conf
from ...clipboard import SystemClipboard, copy_password
from ...exc import ClipboardError, ConfigurationError
from ...generator import Generator
from ...strength import score
from ...util.model import convert_errors, format_errors
from ..exc import CLIError
from ..options import config_options
from ..render import PasswordRenderer

__all__ = ["generate"]


logger = getLogger(__name__)


def raise_unexpected_exc(ex: Exception) -> NoReturn:
    logger.debug(ex, exc_info=ex)
    raise CLIError("Unexpected error: %r" % ex, exit_code=128) from ex


def get_settings(ctx: click.Context) -> _conf.Settings:
    if not (settings := ctx.find_object(_conf.Settings)):
        raise RuntimeError("Configuration not found")
    return settings


@click.command()
@config_options
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of passwords to generate.",
)
@click.option(
    "--copy",
    is_flag=True,
    default=False,
    help="Copy the last generated password to the clipboard.",
)
@click.option(
    "--secure/--no-secure",
    default=None,
    help=(
        "Draw characters from the operating system's CSPRNG instead of the default "
        "pseudo-random generator."
    ),
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Print passwords only, without the strength indicator.",
)
@click.pass_context
def generate(
    ctx: click.Context,
    count: int,
    copy: bool,
    secure: bool | None,
    quiet: bool,
    **overrides: int | bool | None,
) -> None:
    """
    Generate one or more passwords.

    Every enabled character class appears at least once in each password, as long
    as the length leaves room for it.

    Examples:

    \b
      # A 16-character password with every character class
      $ passgen generate -l 16 --lowercase --numbers --symbols
    \b
      # Five passwords, copy the last one
      $ passgen generate -n 5 --copy
    """
    settings = get_settings(ctx)

    try:
        config = settings.generator_config(**overrides)
    except pydantic.ValidationError as ex:
        raise CLIError(format_errors(convert_errors(ex))) from ex

    if secure is None:
        secure = settings.secure_random

    generator = Generator(random.SystemRandom() if secure else random.Random())

    try:
        passwords = [generator.generate(config) for _ in range(count)]
    except ConfigurationError as ex:
        raise CLIError(str(ex)) from ex
    except Exception as ex:
        raise_unexpected_exc(ex)

    PasswordRenderer(passwords, None if quiet else score(config)).render()

    if copy:
        try:
            asyncio.run(copy_password(SystemClipboard(), passwords[-1]))
        except ClipboardError as ex:
            logger.debug(ex, exc_info=ex)
            click.secho("Warning: %s" % ex, fg="yellow", err=True)
        else:
            click.secho("Password copied!", fg="green", err=True)
