"""
CLI utilities for rebuilding the invocation shown in generated files.
"""

from pathlib import Path

import click

PROGRAM_NAME = "schema_to_types"


def _display_value(value) -> str:
    """Show existing paths by file name only, so output does not depend on the checkout location."""
    if isinstance(value, (str, Path)):
        path = Path(str(value))
        return path.name if path.exists() else str(value)
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Rebuild the command line of the current Click invocation.

    Arguments come first, then options that differ from their default.
    Flags are shown without a value.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        params = click.get_current_context().params
    except RuntimeError:
        return PROGRAM_NAME

    arguments = []
    options = []
    for param in click_command.params:
        value = params.get(param.name)
        if value is None or value is False or value == "":
            continue

        if isinstance(param, click.Argument):
            arguments.append(_display_value(value))
        elif isinstance(param, click.Option):
            if value == param.default:
                continue
            flag = param.opts[0]
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, _display_value(value)])

    return " ".join([PROGRAM_NAME, *arguments, *options])
