import logging
import typing

from nor.feedback import Feedback
from nor.wpctl.base import AudioControl
from nor.wpctl.chooser import Chooser
from nor.wpctl.models import DefaultAction, Node, NodeKind

logger = logging.getLogger(__name__)


def _name_id_map(nodes: typing.Iterable[Node]) -> dict[str, int]:
    """Map names to IDs. On duplicate names the last node wins."""
    mapping: dict[str, int] = {}
    for node in nodes:
        if node.name in mapping:
            logger.warning(
                f"Ambiguous {node.kind.value} name '{node.name}': using ID {node.id} over {mapping[node.name]}"
            )
        mapping[node.name] = node.id
    return mapping


def resolve_default(nodes: typing.Sequence[Node], kind: NodeKind, chooser: Chooser) -> DefaultAction:
    """Decide which node of ``kind`` should become the default.

    The chooser is only consulted when there is a real choice to make, i.e.
    when at least one node besides the current default exists.
    """
    nodes = [n for n in nodes if n.kind == kind]
    default_name = next((n.name for n in nodes if n.is_default), None)
    others = [n for n in nodes if not n.is_default]
    name_id_map = _name_id_map(others)

    if not nodes:
        return DefaultAction(message=f"There are no {kind.value}s")
    if len(nodes) == 1:
        return DefaultAction(message=f"There's only one {kind.value}: {nodes[0].name}")
    if not others:
        return DefaultAction(message=f"There's only one non-default {kind.value}: {default_name}")

    selection = chooser.choose(list(name_id_map), f"Set default {kind.value}")
    if selection is None:
        return DefaultAction()
    if selection not in name_id_map:
        raise LookupError(f"Unable to find {kind.value} ID for '{selection}'")
    return DefaultAction(node_id=name_id_map[selection])


def set_default(control: AudioControl, kind: NodeKind, feedback: Feedback, chooser: Chooser) -> int | None:
    """Interactively pick and set the default node of ``kind``.

    Returns the ID of the new default, or None when nothing was changed.
    """
    snapshot = control.status()
    action = resolve_default(snapshot.nodes(kind), kind, chooser)
    if action.message:
        feedback.inform(action.message)
    if action.node_id is None:
        logger.info(f"Default {kind.value} left unchanged")
        return None
    control.set_default(action.node_id)
    return action.node_id


def show_defaults(control: AudioControl, feedback: Feedback) -> None:
    """Tell the user which sink and source are currently the defaults."""
    snapshot = control.status()
    lines = []
    for kind in NodeKind:
        node = snapshot.default(kind)
        lines.append(f"Default {kind.value}: {node.name if node else 'none'}")
    feedback.inform("\n".join(lines))


def reset_default(control: AudioControl) -> None:
    """Forget configured defaults, letting the session manager pick them again."""
    control.clear_default()
