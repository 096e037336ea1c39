"""
CLI utilities for command line reconstruction and target loading.
"""

import importlib
from pathlib import Path

import click

PROG_NAME = "jtd_derive"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

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
        return PROG_NAME

    if not cli_args:
        return PROG_NAME

    arguments = []
    options = []

    for param in click_command.params:
        param_name = param.name
        if param_name not in cli_args:
            continue

        value = cli_args[param_name]
        if not value:
            continue

        # File paths are shown by name only
        if isinstance(value, Path) or (isinstance(value, str) and Path(value).is_absolute()):
            formatted_value = Path(str(value)).name
        else:
            formatted_value = str(value)

        if isinstance(param, click.Argument):
            arguments.append(formatted_value)

        elif isinstance(param, click.Option):
            if value == param.default:
                continue

            flag = param.opts[0] if param.opts else f"--{param_name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, formatted_value])

    return " ".join([PROG_NAME, *arguments, *options])


def load_target(target: str):
    """
    Import the object named by ``package.module:Attr.Nested``.

    Raises:
        click.BadParameter: If the module or attribute cannot be found
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.BadParameter(f"expected MODULE:TYPE, got {target!r}", param_hint="TARGET")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import module {module_name!r}: {e}", param_hint="TARGET") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise click.BadParameter(f"{module_name!r} has no attribute {attr_path!r}", param_hint="TARGET") from e
    return obj
