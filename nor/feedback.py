"""User-visible output: plain text on a terminal, desktop notifications elsewhere."""

import logging
import sys

import click

from nor import process
from nor.config import DEFAULT_NOTIFY_SEND
from nor.wpctl.models import VolumeReading

logger = logging.getLogger(__name__)

NOTIFICATION_SUMMARY = "nor"
NOTIFICATION_NODE_MAX_LENGTH = 21


def volume_classifier(gain: float) -> str:
    """Bucket a gain into the names used by the audio-volume icon theme."""
    if gain <= 0.0:
        return "muted"
    if gain <= 0.3:
        return "low"
    if gain <= 0.6:
        return "medium"
    if gain <= 1.0:
        return "high"
    return "overamplified"


def volume_icon(gain: float) -> str:
    return f"audio-volume-{volume_classifier(gain)}-symbolic"


def normalize(gain: float) -> tuple[int, int]:
    """Split a gain into the percentage shown to the user and its boost tier.

    Gains up to 1.0 are shown as is. Above that, whole multiples of 100% are
    counted as boost tiers, so 1.35 becomes ``(35, 1)`` and 1.0 stays
    ``(100, 0)``.
    """
    percent = max(round(gain * 100), 0)
    if percent <= 100:
        return percent, 0
    tier = (percent - 1) // 100
    return percent - tier * 100, tier


def volume_summary(tier: int) -> str:
    if tier:
        return f"Volume ({tier}× boost)"
    return "Volume"


def format_volume(reading: VolumeReading) -> str:
    """Render a reading for the terminal, e.g. ``35% (1× boost)``."""
    percent, tier = normalize(reading.gain)
    text = f"{percent}%"
    if tier:
        text += f" ({tier}× boost)"
    if reading.muted:
        text += " [MUTED]"
    return text


class DesktopNotifier:
    """Sends desktop notifications through notify-send."""

    def __init__(self, executable: str = DEFAULT_NOTIFY_SEND) -> None:
        self.executable = executable

    def send(
        self,
        summary: str,
        body: str | None = None,
        icon: str | None = None,
        urgency: str | None = None,
        app_name: str | None = None,
        hints: dict[str, int] | None = None,
    ) -> None:
        """Show a notification.

        Args:
            summary: Title line.
            body: Optional message text.
            icon: Icon name from the current theme.
            urgency: "low", "normal" or "critical".
            app_name: Application name reported to the notification server.
            hints: Integer hints, e.g. ``{"value": 40}`` for a progress bar.
        """
        cmd = [self.executable]
        if app_name:
            cmd.append(f"--app-name={app_name}")
        if urgency:
            cmd.append(f"--urgency={urgency}")
        if icon:
            cmd.append(f"--icon={icon}")
        for key, value in (hints or {}).items():
            cmd.append(f"--hint=int:{key}:{value}")
        cmd.append(summary)
        if body:
            cmd.append(body)
        logger.info(f"Sending notification: {summary}")
        process.run(cmd)


class Feedback:
    """Chooses between terminal output and desktop notifications."""

    def __init__(self, notifier: DesktopNotifier, prefer_gui: bool = False, interactive: bool | None = None) -> None:
        """Initialize Feedback.

        Args:
            notifier: Used whenever a notification is shown.
            prefer_gui: Notify even when attached to a terminal.
            interactive: Whether stdout is a terminal. Detected when None.
        """
        self.notifier = notifier
        self.prefer_gui = prefer_gui
        self.interactive = sys.stdout.isatty() if interactive is None else interactive

    @property
    def use_terminal(self) -> bool:
        return self.interactive and not self.prefer_gui

    def inform(self, message: str) -> None:
        """Print a message, or show it as a notification outside a terminal."""
        if self.use_terminal:
            click.echo(message)
            return
        self.notifier.send(NOTIFICATION_SUMMARY, body=message)

    def notify_volume(self, reading: VolumeReading, node_name: str | None = None) -> None:
        """Always show a volume notification, with the node name as body when known."""
        gain = reading.effective
        percent, tier = normalize(gain)
        body = node_name[:NOTIFICATION_NODE_MAX_LENGTH] if node_name else None
        self.notifier.send(
            volume_summary(tier),
            body=body,
            icon=volume_icon(gain),
            urgency="low",
            app_name="volume",
            hints={"value": percent},
        )
