import logging

from nor import process
from nor.config import DEFAULT_MAX_VOLUME, DEFAULT_SINK_SPECIFIER, DEFAULT_WPCTL
from nor.wpctl.base import AudioControl
from nor.wpctl.models import NodeKind, StatusSnapshot, VolumeReading
from nor.wpctl.status import parse_status, parse_volume

logger = logging.getLogger(__name__)


class WpctlAudioControl(AudioControl):
    """PipeWire implementation of AudioControl using wpctl subprocess calls."""

    def __init__(
        self,
        executable: str = DEFAULT_WPCTL,
        sink_specifier: str = DEFAULT_SINK_SPECIFIER,
        max_volume: float = DEFAULT_MAX_VOLUME,
    ) -> None:
        """Initialize WpctlAudioControl.

        Args:
            executable: wpctl binary to run. Defaults to "wpctl".
            sink_specifier: Sink targeted by volume commands. Defaults to
                        "@DEFAULT_AUDIO_SINK@".
            max_volume: Ceiling passed with ``-l`` on every set-volume call.
        """
        self.executable = executable
        self.sink_specifier = sink_specifier
        self.max_volume = max_volume

    def status(self) -> StatusSnapshot:
        """Take a fresh snapshot of all sinks and sources."""
        logger.debug("Querying status")
        result = process.run([self.executable, "status"])
        return parse_status(result.stdout)

    def set_default(self, node_id: int) -> None:
        """Make the node with the given ID the default of its kind."""
        logger.info(f"Setting default node to {node_id}")
        process.run([self.executable, "set-default", str(node_id)])

    def clear_default(self) -> None:
        """Forget all configured default nodes."""
        logger.info("Clearing default nodes")
        process.run([self.executable, "clear-default"])

    def get_volume(self) -> VolumeReading:
        """Read the volume of the default sink."""
        result = process.run([self.executable, "get-volume", self.sink_specifier])
        reading = parse_volume(result.stdout)
        logger.debug(f"Volume of {self.sink_specifier}: {reading}")
        return reading

    def set_volume(self, magnitude: float, sign: str | None = None) -> None:
        """Change the volume of the default sink, capped at ``max_volume``."""
        if sign not in (None, "+", "-"):
            raise ValueError(f"Invalid volume sign: {sign}")
        value = f"{magnitude:.2f}{sign or ''}"
        logger.info(f"Setting volume of {self.sink_specifier} to {value} (limit {self.max_volume:g})")
        process.run(
            [
                self.executable,
                "set-volume",
                "-l",
                f"{self.max_volume:g}",
                self.sink_specifier,
                value,
            ]
        )

    def sink_name(self) -> str | None:
        """Resolve the sink specifier to a node name.

        Works for the default sink and for numeric node IDs. Node names and
        other specifiers yield None.
        """
        if self.sink_specifier == DEFAULT_SINK_SPECIFIER:
            node = self.status().default(NodeKind.SINK)
        elif self.sink_specifier.isdigit():
            node_id = int(self.sink_specifier)
            node = next((n for n in self.status().sinks if n.id == node_id), None)
        else:
            return None
        return node.name if node else None

    def toggle_mute(self) -> None:
        """Flip the mute state of the default sink."""
        logger.info(f"Toggling mute of {self.sink_specifier}")
        process.run([self.executable, "set-mute", self.sink_specifier, "toggle"])
