"""
Rebuilds the invocation shown in the generation comment.
"""

from __future__ import annotations

import shlex
from pathlib import Path

import click
from click.core import ParameterSource

PROGRAM_NAME = "schema_to_resolvers"


def _format_value(param: click.Parameter, value) -> str:
    # Paths are shown by file name so the comment is the same on every machine
    if isinstance(param.type, click.Path):
        value = Path(str(value)).name
    return shlex.quote(str(value))


def reconstruct_command_line(ctx: click.Context | None = None) -> str:
    """
    Return the command line of the running invocation.

    Only parameters given explicitly are included; values are shell-quoted
    so the comment can be pasted back into a shell.

    Args:
        ctx: Click context (defaults to the active one)

    Returns:
        e.g. "schema_to_resolvers schema.json out.py --config config.json",
        or just the program name outside a command invocation
    """
    if ctx is None:
        ctx = click.get_current_context(silent=True)
    if ctx is None:
        return PROGRAM_NAME

    positional: list[str] = []
    named: list[str] = []
    for param in ctx.command.params:
        value = ctx.params.get(param.name)
        if value is None or value is False:
            continue
        if ctx.get_parameter_source(param.name) in (ParameterSource.DEFAULT, ParameterSource.DEFAULT_MAP):
            continue

        if isinstance(param, click.Argument):
            positional.append(_format_value(param, value))
            continue

        flag = max(param.opts, key=len)
        if getattr(param, "is_flag", False):
            named.append(flag)
        else:
            named += [flag, _format_value(param, value)]

    return " ".join([PROGRAM_NAME, *positional, *named])
