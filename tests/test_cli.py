"""CLI behaviour coverage for the rich-click entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from logctl import __init__conf__
from logctl import cli as cli_mod
from logctl import runtime
from logctl.adapters.kmsg import KmsgWriter
from logctl.adapters.stdlib_library import StdlibLoggingLibrary
from logctl.application.router import CommandResult


def invoke(args: list[str], **kwargs: Any):
    runner = CliRunner()
    return runner.invoke(cli_mod.cli, args, prog_name=__init__conf__.shell_command, **kwargs)


@pytest.fixture
def recorded_argv(monkeypatch: pytest.MonkeyPatch) -> list[list[str]]:
    """Replace the command runner with one that records the raw command vector."""

    calls: list[list[str]] = []

    def fake_run_command(argv: list[str], **_: Any) -> CommandResult:
        calls.append(list(argv))
        return CommandResult.OK

    monkeypatch.setattr(cli_mod, "run_command", fake_run_command)
    return calls


@pytest.fixture
def isolated_cli(monkeypatch: pytest.MonkeyPatch, isolated_root: logging.Logger, tmp_path: Path) -> Path:
    """Run real commands against a private logger tree and a file-backed kmsg."""

    device = tmp_path / "kmsg"
    device.touch()
    library = StdlibLoggingLibrary(root=isolated_root)

    def run_isolated(argv: list[str], **kwargs: Any) -> CommandResult:
        return runtime.run_command(argv, library=library, kmsg=KmsgWriter(device), **kwargs)

    monkeypatch.setattr(cli_mod, "run_command", run_isolated)
    return device


@pytest.mark.parametrize(
    "args",
    [
        ["set", "foo*", "err"],
        ["-help"],
        ["klog", "-p", "err", "hello world"],
        ["log", ".", "notice", "--help"],
        ["show"],
    ],
)
def test_command_vector_reaches_router_unchanged(recorded_argv: list[list[str]], args: list[str]) -> None:
    result = invoke(args)

    assert result.exit_code == 0
    assert recorded_argv == [args]


def test_global_options_are_consumed(recorded_argv: list[list[str]]) -> None:
    result = invoke(["--no-traceback", "--no-use-dotenv", "show", "app*"])

    assert result.exit_code == 0
    assert recorded_argv == [["show", "app*"]]


def test_help_exits_with_help_code(isolated_cli: Path) -> None:
    result = invoke(["help"])

    assert result.exit_code == 2
    assert result.output.splitlines()[0] == "logctl COMMAND [PARAM...]"
    assert f"  {'debug':<10}  # 7" in result.output


def test_dash_help_exits_with_help_code(isolated_cli: Path) -> None:
    assert invoke(["-help"]).exit_code == 2


def test_no_command_is_parameter_error(isolated_cli: Path) -> None:
    result = invoke([])

    assert result.exit_code == 1
    assert result.output == "No command specified.\nUse -help for usage information.\n"


def test_show_and_set_against_logger_tree(isolated_cli: Path) -> None:
    assert invoke(["def", "app.db"]).exit_code == 0

    result = invoke(["set", "app*", "debug"])
    assert result.exit_code == 0
    assert result.output == "Setting context level for 'app.db'.\n"

    result = invoke(["show"])
    assert result.exit_code == 0
    assert result.output == "Context '<global>' = warning\nContext 'app.db' = debug\n"


def test_runtime_error_exit_code(isolated_cli: Path) -> None:
    result = invoke(["show", "missing"])

    assert result.exit_code == 1
    assert result.output == "Context 'missing' not found.\n"


def test_klog_through_cli(isolated_cli: Path) -> None:
    result = invoke(["klog", "-p", "warning", "disk slow"])

    assert result.exit_code == 0
    assert isolated_cli.read_text(encoding="utf-8") == "<4>disk slow\n"


def test_version_option() -> None:
    result = invoke(["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __init__conf__.version


def test_traceback_option_sets_preferences(monkeypatch: pytest.MonkeyPatch, recorded_argv: list[list[str]]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    result = invoke(["--traceback", "show"])

    assert result.exit_code == 0
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch, recorded_argv: list[list[str]]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    recorded: dict[str, Any] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        result = CliRunner().invoke(command, argv or [])
        if result.exception is not None and not isinstance(result.exception, SystemExit):
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["prog_name"] = prog_name
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--traceback", "show"])

    assert exit_code == 0
    assert recorded == {"traceback": True, "prog_name": "logctl"}
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False
    assert recorded_argv == [["show"]]


def test_main_can_keep_traceback_preferences(monkeypatch: pytest.MonkeyPatch, recorded_argv: list[list[str]]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, **_: object) -> int:
        return CliRunner().invoke(command, argv or []).exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    assert cli_mod.main(["--traceback", "show"], restore_traceback=False) == 0
    assert lib_cli_exit_tools.config.traceback is True


def test_main_forwards_router_exit_code(monkeypatch: pytest.MonkeyPatch, isolated_cli: Path) -> None:
    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, **_: object) -> int:
        return CliRunner().invoke(command, argv or []).exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    assert cli_mod.main(["show", "nothing*"]) == 1
    assert cli_mod.main(["-help"]) == 2


def test_print_info_banner(capsys: pytest.CaptureFixture[str]) -> None:
    __init__conf__.print_info()

    captured = capsys.readouterr()
    assert captured.out.startswith("Info for logctl:")
    assert "shell_command = logctl" in captured.out
