# mypy: disable-error-code=no-untyped-def

import pytest
from click.testing import CliRunner

from conftest import FakeRun
from nor.__main__ import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_status(fake_run: FakeRun, runner: CliRunner) -> None:
    result = runner.invoke(cli, ["status"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "Sinks:"
    assert "Speakers" in lines[2]
    assert "Headset" in lines[3]
    assert "Sources:" in lines
    assert "Camera" not in result.output


def test_status_without_nodes(fake_run: FakeRun, runner: CliRunner) -> None:
    fake_run.status = "Audio\n ├─ Sinks:\n │\n ├─ Sources:\n │\n"
    result = runner.invoke(cli, ["status"])
    assert result.exit_code == 0, result.output
    assert result.output == "No sinks or sources\n"


def test_status_malformed(fake_run: FakeRun, runner: CliRunner) -> None:
    fake_run.status = "Audio\n ├─ Sinks:\n │  *   45. Speakers   [vol: 0..4]\n"
    result = runner.invoke(cli, ["status"])
    assert result.exit_code == 1
    assert "Invalid volume" in result.output


def test_wpctl_failure_exits_non_zero(fake_run: FakeRun, runner: CliRunner) -> None:
    fake_run.failing.add("clear-default")
    result = runner.invoke(cli, ["default", "reset"])
    assert result.exit_code == 1
    assert "clear-default" in result.output


def test_default_reset(fake_run: FakeRun, runner: CliRunner) -> None:
    result = runner.invoke(cli, ["default", "reset"])
    assert result.exit_code == 0, result.output
    assert fake_run.wpctl_calls("clear-default") == [["wpctl", "clear-default"]]


def test_default_sink_with_menu(fake_run: FakeRun, runner: CliRunner) -> None:
    fake_run.menu_selection = "Headset"
    result = runner.invoke(cli, ["default", "sink", "--prefer-gui"])
    assert result.exit_code == 0, result.output
    assert fake_run.menu_input == "Headset"
    assert fake_run.wpctl_calls("set-default") == [["wpctl", "set-default", "52"]]


def test_default_sink_menu_abort(fake_run: FakeRun, runner: CliRunner) -> None:
    result = runner.invoke(cli, ["default", "sink", "-g"])
    assert result.exit_code == 0, result.output
    assert fake_run.wpctl_calls("set-default") == []


def test_default_source_single(fake_run: FakeRun, runner: CliRunner) -> None:
    result = runner.invoke(cli, ["default", "source"])
    assert result.exit_code == 0, result.output
    assert fake_run.notifications == [["notify-send", "nor", "There's only one source: Microphone"]]
    assert not any(c[0] == "rofi" for c in fake_run.calls)


def test_default_show(fake_run: FakeRun, runner: CliRunner) -> None:
    result = runner.invoke(cli, ["default", "show"])
    assert result.exit_code == 0, result.output
    assert fake_run.notifications == [["notify-send", "nor", "Default sink: Speakers\nDefault source: Microphone"]]


def test_volume_get(fake_run: FakeRun, runner: CliRunner) -> None:
    fake_run.volume = 1.35
    result = runner.invoke(cli, ["volume", "get"])
    assert result.exit_code == 0, result.output
    assert result.output == "35% (1× boost)\n"
    assert fake_run.notifications == []


def test_volume_inc(fake_run: FakeRun, runner: CliRunner) -> None:
    result = runner.invoke(cli, ["volume", "inc", "10"])
    assert result.exit_code == 0, result.output
    assert fake_run.wpctl_calls("set-volume") == [
        ["wpctl", "set-volume", "-l", "1.5", "@DEFAULT_AUDIO_SINK@", "0.10+"]
    ]
    assert len(fake_run.notifications) == 1


def test_volume_dec_default_step(fake_run: FakeRun, runner: CliRunner) -> None:
    result = runner.invoke(cli, ["volume", "dec"])
    assert result.exit_code == 0, result.output
    assert fake_run.wpctl_calls("set-volume")[0][-1] == "0.05-"


def test_volume_set(fake_run: FakeRun, runner: CliRunner) -> None:
    result = runner.invoke(cli, ["volume", "set", "80"])
    assert result.exit_code == 0, result.output
    assert fake_run.volume == 0.8


def test_volume_set_requires_value(fake_run: FakeRun, runner: CliRunner) -> None:
    result = runner.invoke(cli, ["volume", "set"])
    assert result.exit_code == 2


def test_volume_toggle(fake_run: FakeRun, runner: CliRunner) -> None:
    result = runner.invoke(cli, ["volume", "toggle"])
    assert result.exit_code == 0, result.output
    assert fake_run.muted
    assert len(fake_run.notifications) == 1


def test_volume_show(fake_run: FakeRun, runner: CliRunner) -> None:
    result = runner.invoke(cli, ["volume", "show"])
    assert result.exit_code == 0, result.output
    assert len(fake_run.notifications) == 1


def test_options_from_environment(fake_run: FakeRun, runner: CliRunner) -> None:
    result = runner.invoke(
        cli,
        ["volume", "inc"],
        env={"NOR_SINK": "@DEFAULT_SINK@", "NOR_MAX_VOLUME": "1.0", "NOR_STEP": "3"},
    )
    assert result.exit_code == 0, result.output
    assert fake_run.wpctl_calls("set-volume") == [["wpctl", "set-volume", "-l", "1", "@DEFAULT_SINK@", "0.03+"]]


@pytest.mark.parametrize("shell", ["bash", "zsh", "fish"])
def test_generate(runner: CliRunner, shell: str) -> None:
    result = runner.invoke(cli, ["generate", shell])
    assert result.exit_code == 0, result.output
    assert "_NOR_COMPLETE" in result.output


def test_generate_unknown_shell(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["generate", "tcsh"])
    assert result.exit_code == 2
