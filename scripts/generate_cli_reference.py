#!/usr/bin/env python3
"""Generate CLI reference documentation from the typer app."""

import inspect
import sys
from pathlib import Path

# Add parent directory to path to import spendwise
sys.path.insert(0, str(Path(__file__).parent.parent))

from typer.models import ArgumentInfo, CommandInfo, OptionInfo

from spendwise.cli import app


def format_argument(param_name: str, param: inspect.Parameter) -> str:
    """Format a positional argument, marking optional ones."""
    info = param.default
    if isinstance(info, ArgumentInfo):
        help_text = f": {info.help}" if info.help else ""
        return f"- `{param_name.upper()}` (optional){help_text}"
    return f"- `{param_name.upper()}` (required)"


def format_option(param_name: str, info: OptionInfo) -> str:
    """Format an option with its flags, help text and default."""
    flags = list(info.param_decls or []) or [f"--{param_name.replace('_', '-')}"]
    line = "- " + ", ".join(f"`{flag}`" for flag in flags)

    if info.help:
        line += f": {info.help}"

    if info.default not in (None, False, ...):
        line += f" (default: {info.default})"

    return line


def generate_command_doc(command: CommandInfo) -> str:
    """Generate Markdown for a single command."""
    callback = command.callback
    name = command.name or (callback.__name__ if callback else "unknown")
    doc = ((callback.__doc__ if callback else None) or "No description available.").strip()

    lines = [f"### {name}", "", doc, "", "**Usage:**", "", "```bash", f"spendwise {name}", "```", ""]

    sig = inspect.signature(callback) if callback else inspect.Signature()
    arguments = []
    options = []
    for param_name, param in sig.parameters.items():
        if isinstance(param.default, OptionInfo):
            options.append(format_option(param_name, param.default))
        else:
            arguments.append(format_argument(param_name, param))

    if arguments:
        lines.extend(["**Arguments:**", "", *arguments, ""])

    if options:
        lines.extend(["**Options:**", "", *options, ""])

    return "\n".join(lines)


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    lines = [
        "# CLI Commands Reference",
        "",
        "Complete reference for all spendwise CLI commands and options.",
        "",
        "```bash",
        "spendwise [--log-level LEVEL] [COMMAND] [OPTIONS]",
        "```",
        "",
        "## Commands",
        "",
    ]

    commands = sorted(
        app.registered_commands,
        key=lambda c: c.name or (c.callback.__name__ if c.callback else ""),
    )
    for command in commands:
        lines.append(generate_command_doc(command))

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
