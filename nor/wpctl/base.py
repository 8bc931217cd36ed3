import abc

from nor.wpctl.models import StatusSnapshot, VolumeReading


class AudioControl(abc.ABC):
    """Abstract base class for audio control backends."""

    @abc.abstractmethod
    def status(self) -> StatusSnapshot:
        """Take a fresh snapshot of all sinks and sources."""
        ...

    @abc.abstractmethod
    def set_default(self, node_id: int) -> None:
        """Make the node with the given ID the default of its kind."""
        ...

    @abc.abstractmethod
    def clear_default(self) -> None:
        """Forget all configured default nodes."""
        ...

    @abc.abstractmethod
    def get_volume(self) -> VolumeReading:
        """Read the volume of the default sink."""
        ...

    @abc.abstractmethod
    def set_volume(self, magnitude: float, sign: str | None = None) -> None:
        """Change the volume of the default sink.

        Args:
            magnitude: Gain to set, or to add/subtract when ``sign`` is given.
            sign: ``"+"``, ``"-"`` or None for an absolute value.
        """
        ...

    @abc.abstractmethod
    def sink_name(self) -> str | None:
        """Name of the sink targeted by volume commands, if it can be resolved."""
        ...

    @abc.abstractmethod
    def toggle_mute(self) -> None:
        """Flip the mute state of the default sink."""
        ...
