from __future__ import annotations

import pytest

from logctl.application.commands import usage_text
from logctl.application.ports import KernelMessagePort, LoggingLibraryPort
from logctl.application.router import EXIT_FAILURE, EXIT_HELP, EXIT_SUCCESS, SUGGEST_HELP, CommandResult, CommandRouter
from logctl.domain.levels import Severity


def test_no_command(make_library, make_router, console_lines) -> None:
    result = make_router(make_library()).dispatch([])

    assert result is CommandResult.PARAM_ERR
    assert console_lines == ["No command specified.", SUGGEST_HELP]


@pytest.mark.parametrize("command", ["bogus", "SHOW", "Help", "--help"])
def test_unknown_command_is_case_sensitive(make_library, make_router, console_lines, command: str) -> None:
    result = make_router(make_library()).dispatch([command])

    assert result is CommandResult.PARAM_ERR
    assert console_lines == [f"Invalid command '{command}'", SUGGEST_HELP]


@pytest.mark.parametrize("command", ["help", "-help"])
def test_help_prints_usage(make_library, make_router, console_lines, command: str) -> None:
    library = make_library()

    result = make_router(library).dispatch([command])

    assert result is CommandResult.HELP
    assert console_lines == [usage_text("logctl")]
    assert library.calls == []


def test_usage_lists_every_command_and_level() -> None:
    text = usage_text("tool")

    assert text.splitlines()[0] == "tool COMMAND [PARAM...]"
    for keyword in ("help", "def", "flush", "log", "klog", "reconf", "set", "show"):
        assert f"\n  {keyword}" in text
    assert "The global context can be specified as '.'" in text
    for level in Severity:
        assert f"  {level.label:<10}  # {int(level)}" in text


@pytest.mark.parametrize(
    "result, code",
    [
        (CommandResult.OK, EXIT_SUCCESS),
        (CommandResult.PARAM_ERR, EXIT_FAILURE),
        (CommandResult.RUN_ERR, EXIT_FAILURE),
        (CommandResult.HELP, EXIT_HELP),
    ],
)
def test_exit_codes(result: CommandResult, code: int) -> None:
    assert result.exit_code == code


def test_runtime_errors_do_not_suggest_help(make_library, make_router, console_lines) -> None:
    make_router(make_library()).dispatch(["show", "missing"])

    assert SUGGEST_HELP not in console_lines


def test_unexpected_errors_propagate(make_library, fake_kmsg) -> None:
    library = make_library()

    def explode() -> int:
        raise RuntimeError("library crashed")

    library.context_count = explode
    router = CommandRouter(library, fake_kmsg, echo=lambda _line: None)

    with pytest.raises(RuntimeError, match="library crashed"):
        router.dispatch(["show"])


def test_fakes_satisfy_ports(make_library, fake_kmsg) -> None:
    assert isinstance(make_library(), LoggingLibraryPort)
    assert isinstance(fake_kmsg, KernelMessagePort)


def test_router_uses_prog_name_in_usage(make_library, fake_kmsg) -> None:
    lines: list[str] = []
    router = CommandRouter(make_library(), fake_kmsg, echo=lines.append, prog_name="ctl")

    router.dispatch(["help"])

    assert lines[0].startswith("ctl COMMAND [PARAM...]")
    assert router.environment.echo == lines.append
