import functools
import logging
import typing

import click
from tabulate import tabulate

from nor.config import Settings
from nor.errors import NorError
from nor.feedback import DesktopNotifier, Feedback, format_volume
from nor.wpctl.chooser import select_chooser
from nor.wpctl.control import WpctlAudioControl
from nor.wpctl.models import Decrease, Increase, Node, NodeKind, Query, Set, Show, Toggle, VolumeRequest
from nor.wpctl.node import reset_default, set_default, show_defaults
from nor.wpctl.volume import VolumeController

logger = logging.getLogger(__name__)

F = typing.TypeVar("F", bound=typing.Callable[..., typing.Any])

prefer_gui_option = click.option(
    "-g",
    "--prefer-gui",
    is_flag=True,
    help="Prefer using GUI facilities for selection and messages, like rofi and desktop notifications",
)


def fail_on_error(func: F) -> F:
    """Turn errors from external programs into a clean non-zero exit."""

    @functools.wraps(func)
    def wrapper(*args: typing.Any, **kwargs: typing.Any) -> typing.Any:
        try:
            return func(*args, **kwargs)
        except NorError as e:
            logger.debug("Command failed", exc_info=True)
            raise click.ClickException(str(e)) from e

    return typing.cast(F, wrapper)


def make_control(settings: Settings) -> WpctlAudioControl:
    return WpctlAudioControl(settings.wpctl, settings.sink_specifier, settings.max_volume)


def make_feedback(settings: Settings, prefer_gui: bool = False) -> Feedback:
    return Feedback(DesktopNotifier(settings.notify_send), prefer_gui=prefer_gui)


def _node_rows(nodes: typing.Sequence[Node]) -> list[list[typing.Any]]:
    return [[node.id, node.name, f"{node.volume:.2f}", node.muted, node.is_default] for node in nodes]


@click.command()
@click.pass_obj
@fail_on_error
def status(obj: Settings) -> None:
    """Show sinks and sources."""
    snapshot = make_control(obj).status()
    headers = ["ID", "Name", "Volume", "Muted", "Default"]
    sections = []
    for title, nodes in (("Sinks:", snapshot.sinks), ("Sources:", snapshot.sources)):
        if nodes:
            sections.append(f"{title}\n{tabulate(_node_rows(nodes), headers=headers, tablefmt='plain')}")
    if not sections:
        click.echo("No sinks or sources")
        return
    click.echo("\n\n".join(sections))


@click.group()
def default() -> None:
    """Set defaults."""
    pass


@default.command("reset")
@click.pass_obj
@fail_on_error
def default_reset(obj: Settings) -> None:
    """Reset defaults."""
    reset_default(make_control(obj))


@default.command("show")
@prefer_gui_option
@click.pass_obj
@fail_on_error
def default_show(obj: Settings, prefer_gui: bool) -> None:
    """Show defaults."""
    show_defaults(make_control(obj), make_feedback(obj, prefer_gui))


def _set_default(settings: Settings, kind: NodeKind, prefer_gui: bool) -> None:
    feedback = make_feedback(settings, prefer_gui)
    chooser = select_chooser(prefer_gui, feedback.interactive, settings.menu)
    set_default(make_control(settings), kind, feedback, chooser)


@default.command("sink")
@prefer_gui_option
@click.pass_obj
@fail_on_error
def default_sink(obj: Settings, prefer_gui: bool) -> None:
    """Set default sink."""
    _set_default(obj, NodeKind.SINK, prefer_gui)


@default.command("source")
@prefer_gui_option
@click.pass_obj
@fail_on_error
def default_source(obj: Settings, prefer_gui: bool) -> None:
    """Set default source."""
    _set_default(obj, NodeKind.SOURCE, prefer_gui)


@click.group()
def volume() -> None:
    """Modify/toggle volume."""
    pass


def _apply(settings: Settings, request: VolumeRequest) -> None:
    controller = VolumeController(make_control(settings), make_feedback(settings), settings.default_step)
    _, new = controller.apply(request)
    if isinstance(request, Query):
        click.echo(format_volume(new))


@volume.command("dec")
@click.argument("step", type=click.IntRange(min=0), required=False)
@click.pass_obj
@fail_on_error
def volume_dec(obj: Settings, step: int | None) -> None:
    """Decrease volume by STEP percentage points."""
    _apply(obj, Decrease(step))


@volume.command("inc")
@click.argument("step", type=click.IntRange(min=0), required=False)
@click.pass_obj
@fail_on_error
def volume_inc(obj: Settings, step: int | None) -> None:
    """Increase volume by STEP percentage points."""
    _apply(obj, Increase(step))


@volume.command("set")
@click.argument("value", type=click.IntRange(min=0))
@click.pass_obj
@fail_on_error
def volume_set(obj: Settings, value: int) -> None:
    """Set volume to VALUE percent."""
    _apply(obj, Set(value))


@volume.command("toggle")
@click.pass_obj
@fail_on_error
def volume_toggle(obj: Settings) -> None:
    """Toggle mute state."""
    _apply(obj, Toggle())


@volume.command("get")
@click.pass_obj
@fail_on_error
def volume_get(obj: Settings) -> None:
    """Print the current volume."""
    _apply(obj, Query())


@volume.command("show")
@click.pass_obj
@fail_on_error
def volume_show(obj: Settings) -> None:
    """Show the current volume as a notification."""
    _apply(obj, Show())
