"""cssbuild CLI entry point: Click group with subcommands."""

import click

from cssbuild import __version__
from cssbuild.config import CssbuildConfig, configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="cssbuild")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override CSSBUILD_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """cssbuild - compose CSS selectors and shape records from the shell."""
    config = CssbuildConfig.from_env()
    if log_level:
        config = CssbuildConfig(log_level=log_level, json_indent=config.json_indent)
    configure_logging(config)
    ctx.obj = config


# Import and register subcommands
from cssbuild.cli.selector import combine, selector  # noqa: E402
from cssbuild.cli.rectangle import rectangle  # noqa: E402

cli.add_command(selector)
cli.add_command(combine)
cli.add_command(rectangle)
