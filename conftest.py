# mypy: disable-error-code=no-untyped-def

import logging
import subprocess
import typing

import pytest

from nor.wpctl.chooser import Chooser

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

STATUS_OUTPUT = """\
PipeWire 'pipewire-0' [1.0.5, user@host, cookie:1234]
 └─ Clients:
        33. WirePlumber                         [1.0.5, user@host, pid:1200]

Audio
 ├─ Devices:
 │      42. Built-in Audio                      [alsa]
 │
 ├─ Sinks:
 │  *   45. Speakers                            [vol: 0.40]
 │      52. Headset                             [vol: 0.60]
 │
 ├─ Sink endpoints:
 │
 ├─ Sources:
 │  *   46. Microphone                          [vol: 1.00]
 │
 ├─ Source endpoints:
 │
 └─ Streams:

Video
 ├─ Devices:
 │      60. Integrated Camera                   [v4l2]
 │
 ├─ Sinks:
 │
 ├─ Sources:
 │  *   61. Integrated Camera (V4L2)            [vol: 1.00]

Settings
 └─ Default Configured Node Names:
         0. Audio/Sink    alsa_output.pci-0000_00_1f.3.analog-stereo
"""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "gui: mark test as needing a real computer to run on"
    )


class FakeRun:
    """Stands in for subprocess.run, emulating wpctl, notify-send and rofi."""

    def __init__(self, status: str = STATUS_OUTPUT, volume: float = 0.4, muted: bool = False) -> None:
        self.status = status
        self.volume = volume
        self.muted = muted
        self.calls: list[list[str]] = []
        self.notifications: list[list[str]] = []
        self.failing: set[str] = set()
        self.menu_selection: str | None = None
        self.menu_input: str | None = None

    def wpctl_calls(self, subcommand: str) -> list[list[str]]:
        return [c for c in self.calls if c[0] == "wpctl" and c[1] == subcommand]

    def __call__(self, cmd, input=None, capture_output=False, text=False, check=False):
        cmd = list(cmd)
        self.calls.append(cmd)
        stdout = ""
        returncode = 0
        program = cmd[0]
        if program in self.failing or (len(cmd) > 1 and cmd[1] in self.failing):
            returncode = 1
        elif program == "notify-send":
            self.notifications.append(cmd)
        elif program == "rofi":
            self.menu_input = input
            if self.menu_selection is None:
                returncode = 1
            else:
                stdout = f"{self.menu_selection}\n"
        elif program == "wpctl":
            stdout = self._wpctl(cmd[1:])
        else:
            raise FileNotFoundError(2, "No such file or directory", program)
        if check and returncode != 0:
            raise subprocess.CalledProcessError(returncode, cmd, stdout, "failed")
        return subprocess.CompletedProcess(cmd, returncode, stdout, "")

    def _wpctl(self, args: list[str]) -> str:
        if args[0] == "status":
            return self.status
        if args[0] == "get-volume":
            return f"Volume: {self.volume:.2f}{' [MUTED]' if self.muted else ''}\n"
        if args[0] == "set-volume":
            assert args[1] == "-l"
            ceiling = float(args[2])
            value = args[4]
            if value.endswith("+"):
                volume = self.volume + float(value[:-1])
            elif value.endswith("-"):
                volume = self.volume - float(value[:-1])
            else:
                volume = float(value)
            self.volume = round(min(max(volume, 0.0), ceiling), 2)
        elif args[0] == "set-mute":
            assert args[2] == "toggle"
            self.muted = not self.muted
        return ""


class FakeChooser(Chooser):
    def __init__(self, selection: str | None = None) -> None:
        self.selection = selection
        self.calls: list[tuple[list[str], str]] = []

    def choose(self, names: list[str], prompt: str) -> str | None:
        self.calls.append((names, prompt))
        return self.selection


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> typing.Generator[FakeRun, None, None]:
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    yield fake


@pytest.fixture
def fake_chooser() -> FakeChooser:
    return FakeChooser()
