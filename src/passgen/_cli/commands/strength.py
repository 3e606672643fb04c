import click
import pydantic

from ...strength import score
from ...util.model import convert_errors, format_errors
from ..exc import CLIError
from ..options import config_options
from ..render import PasswordRenderer
from .generate import get_settings

__all__ = ["strength"]


@click.command()
@config_options
@click.pass_context
def strength(ctx: click.Context, **overrides: int | bool | None) -> None:
    """
    Show the strength rating of a configuration.

    The rating depends on the enabled character classes and the length only, never
    on a particular password.

    \b
      weak    anything below medium
      medium  upper- or lowercase, numbers or symbols, length >= 6
      strong  upper- and lowercase, numbers or symbols, length >= 8
    """
    try:
        config = get_settings(ctx).generator_config(**overrides)
    except pydantic.ValidationError as ex:
        raise CLIError(format_errors(convert_errors(ex))) from ex

    PasswordRenderer(strength=score(config)).render()
