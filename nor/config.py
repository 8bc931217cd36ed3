import dataclasses

DEFAULT_WPCTL = "wpctl"
DEFAULT_SINK_SPECIFIER = "@DEFAULT_AUDIO_SINK@"
DEFAULT_MAX_VOLUME = 1.5
DEFAULT_STEP = 5
DEFAULT_NOTIFY_SEND = "notify-send"
DEFAULT_MENU = "rofi"


@dataclasses.dataclass(frozen=True)
class Settings:
    """Process-wide configuration, fixed at startup."""

    wpctl: str = DEFAULT_WPCTL
    """Control executable."""

    sink_specifier: str = DEFAULT_SINK_SPECIFIER
    """Sink passed to volume commands."""

    max_volume: float = DEFAULT_MAX_VOLUME
    """Ceiling passed to every ``set-volume`` call."""

    default_step: int = DEFAULT_STEP
    """Percentage points used by ``volume inc``/``dec`` without a step."""

    notify_send: str = DEFAULT_NOTIFY_SEND
    """Desktop notification executable."""

    menu: str = DEFAULT_MENU
    """Menu launcher used for GUI selection."""
