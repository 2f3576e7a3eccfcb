"""Static package metadata surfaced by the CLI banner and ``--version``.

Purpose
-------
Keep the project name, version and console-script name in one place so the
CLI, tests and packaging agree on them.
"""

from __future__ import annotations

from importlib import metadata as _metadata

name = "logctl"
title = "Inspect and adjust logging context levels from the command line"
shell_command = "logctl"
homepage = "https://github.com/logctl/logctl"
author = "logctl maintainers"


def _resolve_version() -> str:
    try:
        return _metadata.version(name)
    except _metadata.PackageNotFoundError:
        return "0.0.0.dev0"


version = _resolve_version()


def print_info() -> None:
    """Print the package metadata banner."""

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = ["author", "homepage", "name", "print_info", "shell_command", "title", "version"]
