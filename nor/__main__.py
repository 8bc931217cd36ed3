import logging

import click
from click.shell_completion import get_completion_class

from nor.config import (
    DEFAULT_MAX_VOLUME,
    DEFAULT_MENU,
    DEFAULT_NOTIFY_SEND,
    DEFAULT_SINK_SPECIFIER,
    DEFAULT_STEP,
    DEFAULT_WPCTL,
    Settings,
)
from nor.wpctl.cli import default, status, volume

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]
SHELLS = ["bash", "zsh", "fish"]


@click.group()
@click.option("--wpctl", envvar="NOR_WPCTL", default=DEFAULT_WPCTL, show_default=True, help="wpctl executable")
@click.option(
    "--sink",
    envvar="NOR_SINK",
    default=DEFAULT_SINK_SPECIFIER,
    show_default=True,
    help="Sink targeted by volume commands",
)
@click.option(
    "--max-volume",
    envvar="NOR_MAX_VOLUME",
    type=click.FloatRange(min=0.0),
    default=DEFAULT_MAX_VOLUME,
    show_default=True,
    help="Upper volume limit passed to wpctl",
)
@click.option(
    "--step",
    envvar="NOR_STEP",
    type=click.IntRange(min=0),
    default=DEFAULT_STEP,
    show_default=True,
    help="Default volume step in percentage points",
)
@click.option(
    "--notify-send",
    envvar="NOR_NOTIFY_SEND",
    default=DEFAULT_NOTIFY_SEND,
    show_default=True,
    help="Notification executable",
)
@click.option("--menu", envvar="NOR_MENU", default=DEFAULT_MENU, show_default=True, help="Menu launcher executable")
@click.option("-v", "--verbose", count=True, help="Log more details (repeat for debug output)")
@click.version_option(package_name="nor")
@click.pass_context
def cli(
    ctx: click.Context,
    wpctl: str,
    sink: str,
    max_volume: float,
    step: int,
    notify_send: str,
    menu: str,
    verbose: int,
) -> None:
    """nor: Tiny wpctl wrapper."""
    logging.basicConfig(
        level=LOG_LEVELS[min(verbose, len(LOG_LEVELS) - 1)],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = Settings(
        wpctl=wpctl,
        sink_specifier=sink,
        max_volume=max_volume,
        default_step=step,
        notify_send=notify_send,
        menu=menu,
    )


@cli.command()
@click.argument("shell", type=click.Choice(SHELLS))
def generate(shell: str) -> None:
    """Generate completions for SHELL."""
    completion_class = get_completion_class(shell)
    if completion_class is None:
        raise click.ClickException(f"Unsupported shell: {shell}")
    completion = completion_class(cli, {}, "nor", "_NOR_COMPLETE")
    click.echo(completion.source())


cli.add_command(status)
cli.add_command(default)
cli.add_command(volume)


if __name__ == "__main__":
    cli()
