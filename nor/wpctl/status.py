"""Parsing of ``wpctl`` text output.

``wpctl status`` prints a tree like::

    Audio
     ├─ Devices:
     │      42. Built-in Audio                      [alsa]
     │
     ├─ Sinks:
     │  *   45. Speakers                            [vol: 0.40]
     │      52. Headset                             [vol: 0.60 MUTED]
     │
     ├─ Sources:
     │  *   46. Microphone                          [vol: 1.00]

Only the node lines below ``Sinks:`` and ``Sources:`` of the ``Audio`` section
are kept. The format is undocumented, so everything that depends on it lives
in this module.
"""

import enum
import logging
import re

from nor.errors import MalformedStatusError
from nor.wpctl.models import Node, NodeKind, StatusSnapshot, VolumeReading

logger = logging.getLogger(__name__)

AUDIO_SECTION = "Audio"
SINKS_MARKER = "Sinks:"
SOURCES_MARKER = "Sources:"

NODE_REGEX = re.compile(
    r"(?P<default>\*)?\s+(?P<id>[0-9]+)\. (?P<name>[a-zA-Z0-9()+/ .,:_&'-]+) "
    r"\[vol: (?P<volume>[0-9.]+)(?P<muted> MUTED)?\]"
)
VOLUME_REGEX = re.compile(r"^Volume: (?P<volume>\S+)(?P<muted> \[MUTED\])?$")


class _State(enum.Enum):
    OUTSIDE = enum.auto()
    AUDIO = enum.auto()
    NODES = enum.auto()


def _parse_float(value: str, line: str) -> float:
    try:
        return float(value)
    except ValueError as e:
        raise MalformedStatusError(f"Invalid volume {value!r} in line: {line!r}") from e


def parse_status(output: str) -> StatusSnapshot:
    """Parse the output of ``wpctl status`` into a snapshot of sinks and sources."""
    state = _State.OUTSIDE
    kind: NodeKind | None = None
    nodes: dict[NodeKind, list[Node]] = {NodeKind.SINK: [], NodeKind.SOURCE: []}

    for line in output.splitlines():
        line = line.rstrip()
        if line.startswith(AUDIO_SECTION):
            state = _State.AUDIO
            continue
        if line and not line[0].isspace():
            # Video, Settings and other top level sections
            state = _State.OUTSIDE
            continue
        if state == _State.OUTSIDE:
            continue

        if state == _State.NODES and kind is not None:
            match = NODE_REGEX.search(line)
            if match:
                node = Node(
                    id=int(match.group("id")),
                    kind=kind,
                    name=match.group("name").strip(),
                    volume=_parse_float(match.group("volume"), line),
                    muted=match.group("muted") is not None,
                    is_default=match.group("default") is not None,
                )
                if node.is_default and any(n.is_default for n in nodes[kind]):
                    raise MalformedStatusError(f"More than one default {kind.value} in line: {line!r}")
                logger.debug(f"Parsed {kind.value}: {node}")
                nodes[kind].append(node)
                continue
            state = _State.AUDIO
            kind = None

        if line.endswith(SINKS_MARKER):
            state, kind = _State.NODES, NodeKind.SINK
        elif line.endswith(SOURCES_MARKER):
            state, kind = _State.NODES, NodeKind.SOURCE

    snapshot = StatusSnapshot(sinks=tuple(nodes[NodeKind.SINK]), sources=tuple(nodes[NodeKind.SOURCE]))
    logger.info(f"Parsed {len(snapshot.sinks)} sinks and {len(snapshot.sources)} sources")
    return snapshot


def parse_volume(output: str) -> VolumeReading:
    """Parse the output of ``wpctl get-volume``, e.g. ``Volume: 0.40 [MUTED]``."""
    text = output.strip()
    match = VOLUME_REGEX.match(text)
    if not match:
        raise MalformedStatusError(f"Unexpected get-volume output: {text!r}")
    return VolumeReading(
        gain=_parse_float(match.group("volume"), text),
        muted=match.group("muted") is not None,
    )
