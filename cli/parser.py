"""Command parser for CLI input."""

import shlex

from common.constants import ROOT_PATH
from cli.models import (
    CommandRequest,
    ExistsCommand,
    LsCommand,
    MkdirCommand,
    StatCommand,
    TouchCommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (one of Touch/Mkdir/Ls/Exists/Stat)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]

    if command_name == "touch":
        return TouchCommand(path=_single_path("touch", tokens[1:]))
    elif command_name == "mkdir":
        return _parse_mkdir(tokens[1:])
    elif command_name == "ls":
        return _parse_ls(tokens[1:])
    elif command_name == "exists":
        return ExistsCommand(path=_single_path("exists", tokens[1:]))
    elif command_name == "stat":
        return StatCommand(path=_single_path("stat", tokens[1:]))
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _single_path(command_name: str, args: list[str]) -> str:
    if len(args) != 1:
        raise ParseError(f"{command_name} requires exactly 1 argument: <path>")
    return args[0]


def _parse_mkdir(args: list[str]) -> MkdirCommand:
    """Parse 'mkdir [-p] <path>' command."""
    parents = False
    paths = []
    for arg in args:
        if arg == "-p":
            parents = True
        elif arg.startswith("-"):
            raise ParseError(f"mkdir: unknown option {arg}")
        else:
            paths.append(arg)

    if len(paths) != 1:
        raise ParseError("mkdir requires exactly 1 path: mkdir [-p] <path>")

    return MkdirCommand(path=paths[0], parents=parents)


def _parse_ls(args: list[str]) -> LsCommand:
    """Parse 'ls [path]' command, defaulting to the root."""
    if len(args) > 1:
        raise ParseError("ls accepts at most 1 argument: ls [path]")
    return LsCommand(path=args[0] if args else ROOT_PATH)
