import dataclasses
import enum
import typing


class NodeKind(str, enum.Enum):
    """Kind of audio node."""

    SINK = "sink"
    """Output endpoint (speakers, headset)."""

    SOURCE = "source"
    """Input endpoint (microphone)."""


@dataclasses.dataclass(frozen=True)
class Node:
    """Dataclass for one audio endpoint as listed by ``wpctl status``."""

    id: int
    """Node ID, only valid for the snapshot it was read from."""

    kind: NodeKind
    """Whether the node is a sink or a source."""

    name: str
    """Trimmed human-readable label."""

    volume: float
    """Raw gain (0.0-1.5 typical, above 1.0 is boosted)."""

    muted: bool = False
    """Mute state, tracked apart from the gain."""

    is_default: bool = False
    """Whether the node is the current default of its kind."""


@dataclasses.dataclass(frozen=True)
class StatusSnapshot:
    """Immutable result of parsing one ``wpctl status`` dump."""

    sinks: tuple[Node, ...] = ()
    """Sinks in textual order."""

    sources: tuple[Node, ...] = ()
    """Sources in textual order."""

    def nodes(self, kind: NodeKind) -> tuple[Node, ...]:
        """Return the nodes of the given kind."""
        if kind == NodeKind.SINK:
            return self.sinks
        if kind == NodeKind.SOURCE:
            return self.sources
        raise ValueError(f"Invalid node kind: {kind}")

    def default(self, kind: NodeKind) -> Node | None:
        """Return the default node of the given kind, if any."""
        return next((n for n in self.nodes(kind) if n.is_default), None)


@dataclasses.dataclass(frozen=True)
class VolumeReading:
    """Volume of a node as reported by ``wpctl get-volume``."""

    gain: float
    """Raw gain."""

    muted: bool = False
    """Mute state."""

    @property
    def effective(self) -> float:
        """Gain actually heard: zero while muted."""
        return 0.0 if self.muted else self.gain


@dataclasses.dataclass(frozen=True)
class Decrease:
    """Lower the volume by ``step`` percentage points."""

    step: int | None = None


@dataclasses.dataclass(frozen=True)
class Increase:
    """Raise the volume by ``step`` percentage points."""

    step: int | None = None


@dataclasses.dataclass(frozen=True)
class Set:
    """Set the volume to ``value`` percent."""

    value: int


@dataclasses.dataclass(frozen=True)
class Toggle:
    """Flip the mute state."""


@dataclasses.dataclass(frozen=True)
class Query:
    """Read the volume without side effects."""


@dataclasses.dataclass(frozen=True)
class Show:
    """Read the volume and always notify."""


VolumeRequest = typing.Union[Decrease, Increase, Set, Toggle, Query, Show]


@dataclasses.dataclass(frozen=True)
class DefaultAction:
    """Outcome of resolving which node should become the default."""

    node_id: int | None = None
    """Node to make default, if one was chosen."""

    message: str | None = None
    """Informational message when there is nothing to choose from."""
