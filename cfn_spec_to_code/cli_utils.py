"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

PROGRAM_NAME = "cfn_spec_to_code"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    The result goes into the header of the generated file, so paths are
    reduced to file names to keep the output independent of the working
    directory.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return PROGRAM_NAME

    if not cli_args:
        return PROGRAM_NAME

    cmd_parts = [PROGRAM_NAME]
    arguments = []
    options = []

    for param in click_command.params:
        param_name = param.name
        if param_name not in cli_args:
            continue

        value = cli_args[param_name]
        if value is None:
            continue

        if isinstance(param, click.Argument):
            arguments.append(_format_value(value))

        elif isinstance(param, click.Option):
            # Skip defaults and logging-only flags
            if value == param.default or param_name == "verbose":
                continue

            if param.is_flag:
                flag = param.opts[0] if value else (param.secondary_opts or param.opts)[0]
                options.append(flag)
            else:
                flag = param.opts[0] if param.opts else f"--{param_name}"
                options.extend([flag, _format_value(value)])

    cmd_parts.extend(arguments)
    cmd_parts.extend(options)

    return " ".join(cmd_parts)


def _format_value(value) -> str:
    """Convert file paths to file names for cleaner display."""
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.is_absolute() or path_obj.exists() else str(value)
    return str(value)
