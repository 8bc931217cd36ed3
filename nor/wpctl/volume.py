import logging

from nor.config import DEFAULT_STEP
from nor.feedback import Feedback
from nor.wpctl.base import AudioControl
from nor.wpctl.models import (
    Decrease,
    Increase,
    Query,
    Set,
    Show,
    Toggle,
    VolumeReading,
    VolumeRequest,
)

logger = logging.getLogger(__name__)

MINIMUM_MODIFY_STEP = 0.01


class VolumeController:
    """Applies volume requests to the default sink and notifies about the result."""

    def __init__(self, control: AudioControl, feedback: Feedback, default_step: int = DEFAULT_STEP) -> None:
        self.control = control
        self.feedback = feedback
        self.default_step = default_step

    def apply(self, request: VolumeRequest) -> tuple[VolumeReading, VolumeReading]:
        """Apply ``request`` and return the volume before and after it.

        A notification is shown when the volume changed or ended up silent.
        ``Show`` always notifies, ``Query`` never does.
        """
        old = self.control.get_volume()
        if isinstance(request, Query):
            return old, old
        if isinstance(request, Show):
            self._notify(old)
            return old, old

        if isinstance(request, (Decrease, Increase)):
            step = self.default_step if request.step is None else request.step
            sign = "-" if isinstance(request, Decrease) else "+"
            self.control.set_volume(max(step / 100.0, MINIMUM_MODIFY_STEP), sign)
        elif isinstance(request, Set):
            self.control.set_volume(max(request.value / 100.0, 0.0))
        elif isinstance(request, Toggle):
            self.control.toggle_mute()
        else:
            raise ValueError(f"Invalid volume request: {request}")

        new = self.control.get_volume()
        logger.info(f"Volume changed from {old.effective:.2f} to {new.effective:.2f}")
        if new.effective != old.effective or new.effective == 0.0:
            self._notify(new)
        else:
            logger.debug("Volume unchanged, not notifying")
        return old, new

    def _notify(self, reading: VolumeReading) -> None:
        self.feedback.notify_volume(reading, self.control.sink_name())
