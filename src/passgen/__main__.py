#!/usr/bin/env python3

import logging
import pathlib

import click
import lazy_object_proxy
import pydantic

from passgen._cli.commands import generate, strength
from passgen._cli.exc import ConfigSyntaxError, ConfigValidationError
from passgen._conf import Settings
from passgen.util.model import convert_errors, format_errors

ConfigOption = pathlib.Path | None


def validate_config(ctx: click.Context, fn: ConfigOption) -> Settings:
    payload = {}

    if fn is not None:
        from ruamel import yaml
        from ruamel.yaml.error import YAMLError

        _loader = yaml.YAML(typ="safe")

        try:
            payload = _loader.load(fn.read_bytes()) or {}
        except YAMLError as ex:
            raise ConfigSyntaxError(
                str(ex),
                filename=fn,
            ) from ex

        if not isinstance(payload, dict):
            raise ConfigValidationError(
                "Expected a mapping at the top level of %r, got %s."
                % (str(fn), type(payload).__name__)
            )

    try:
        res = Settings(**payload)
    except pydantic.ValidationError as ex:
        raise ConfigValidationError(format_errors(convert_errors(ex))) from ex

    assert isinstance(res, Settings), "Expected %r, got %r" % (
        Settings.__name__,
        res,
    )
    return res


@click.group()
@click.option("-D", "--debug/--no-debug", default=False, help="Enable debug mode.")
@click.option(
    "-c",
    "--config",
    type=click.Path(
        dir_okay=False,
        exists=True,
        readable=True,
        path_type=pathlib.Path,
    ),
    help="Path to a YAML configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: ConfigOption) -> None:
    """Generate passwords and rate their configuration."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
    )
    ctx.obj = lazy_object_proxy.Proxy(lambda: validate_config(ctx=ctx, fn=config))


cli.add_command(generate)
cli.add_command(strength)


def main() -> None:
    cli(auto_envvar_prefix="PASSGEN")


if __name__ == "__main__":
    main()
