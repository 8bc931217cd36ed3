from nor.wpctl.base import AudioControl
from nor.wpctl.control import WpctlAudioControl
from nor.wpctl.models import (
    Decrease,
    DefaultAction,
    Increase,
    Node,
    NodeKind,
    Query,
    Set,
    Show,
    StatusSnapshot,
    Toggle,
    VolumeReading,
    VolumeRequest,
)
from nor.wpctl.status import parse_status, parse_volume

__all__ = [
    "AudioControl",
    "Decrease",
    "DefaultAction",
    "Increase",
    "Node",
    "NodeKind",
    "Query",
    "Set",
    "Show",
    "StatusSnapshot",
    "Toggle",
    "VolumeReading",
    "VolumeRequest",
    "WpctlAudioControl",
    "parse_status",
    "parse_volume",
]
