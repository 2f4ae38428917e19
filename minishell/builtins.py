"""The commands the shell runs itself: cd, echo, env, exit, export, pwd, unset."""

from __future__ import annotations

import os
import re
import sys
from typing import Callable, Optional, Sequence

from minishell.environment import SHELL_NAME, Shell
from minishell.text import is_alnum, is_digit

Builtin = Callable[[Sequence[str], Shell], int]

_LONG_MAX = (1 << 63) - 1
_EXIT_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)[ \t\n\v\f\r]*")


def _err(text: str) -> None:
    sys.stderr.write(text)


def _out(text: str) -> None:
    sys.stdout.write(text)


def _bad_argument(name: str) -> int:
    _err(f"{name}: bad argument\n")
    return 3


def _reject_options(name: str, args: Sequence[str]) -> Optional[int]:
    """Status for ``--help`` or an option as first argument, else None."""
    if not args:
        return None
    first = args[0]
    if first == "--help":
        _err(f"{name}: no help provided\n")
        return 2
    if first.startswith("-") and len(first) > 1:
        _err(f"{SHELL_NAME}: {name} is not accepting options today\n")
        return 2
    return None


def _change_directory(target: str, shell: Shell) -> int:
    old_pwd = shell.env.get("PWD")
    try:
        os.chdir(target)
    except OSError as exc:
        _err(f"cd: {target}: {exc.strerror}\n")
        return 1
    shell.env.change("OLDPWD", old_pwd)
    try:
        shell.env.change("PWD", os.getcwd())
    except OSError as exc:
        _err(f"cd: setting PWD: {exc.strerror}\n")
        return 3
    return 0


def builtin_cd(argv: Sequence[str], shell: Shell) -> int:
    """Change the working directory to the single argument."""
    if not argv:
        return _bad_argument("cd")
    args = list(argv[1:])
    status = _reject_options("cd", args)
    if status is not None:
        return status
    if not args:
        _err("cd: argument needed\n")
        return 2
    if len(args) > 1:
        _err(f"{SHELL_NAME}:cd: too many arguments\n")
        return 1
    return _change_directory(args[0], shell)


def _is_no_newline_flag(arg: str) -> bool:
    return len(arg) > 1 and arg[0] == "-" and set(arg[1:]) == {"n"}


def builtin_echo(argv: Sequence[str], shell: Shell) -> int:
    """Print the arguments separated by spaces; ``-n`` drops the newline."""
    if not argv:
        return _bad_argument("echo")
    args = list(argv[1:])
    flags = 0
    for arg in args:
        if not _is_no_newline_flag(arg):
            break
        flags += 1
    _out(" ".join(args[flags:]))
    if not flags:
        _out("\n")
    return 0


def builtin_env(argv: Sequence[str], shell: Shell) -> int:
    """Print every variable that has a value as ``NAME=value``."""
    if argv is None or shell is None:
        return 2
    if len(argv) < 2:
        for var in shell.env:
            if var.value is not None:
                _out(f"{var.key}={var.value}\n")
        return 0
    if argv[1].startswith("-"):
        _err(f"{SHELL_NAME}: env is not accepting options today\n")
        return 125
    _err(f"env: '{argv[1]}': We are not launching another program pal\n")
    return 127


def _exit_number(text: str) -> Optional[int]:
    match = _EXIT_NUMBER.fullmatch(text)
    if match is None:
        return None
    sign, digits = match.groups()
    number = int(digits)
    if sign == "-":
        if number > _LONG_MAX + 1:
            return None
        number = -number
    elif number > _LONG_MAX:
        return None
    return number & 0xFF


def builtin_exit(argv: Sequence[str], shell: Shell) -> int:
    """Mark the shell finished and return the status it should exit with."""
    if not argv:
        return _bad_argument("exit")
    args = list(argv[1:])
    shell.finished = True
    _err("exit\n")
    if not args:
        return shell.status
    status = _exit_number(args[0])
    if status is None:
        _err(f"{SHELL_NAME}: exit: {args[0]}: numeric argument required\n")
        return 2
    if len(args) > 1:
        _err(f"{SHELL_NAME}:exit: too many arguments\n")
        shell.finished = False
        return 1
    return status


def _is_valid_name(name: str) -> bool:
    return (
        bool(name)
        and not is_digit(name[0])
        and all(is_alnum(c) or c == "_" for c in name)
    )


def _add_export(arg: str, shell: Shell) -> int:
    name, equal, value = arg.partition("=")
    appending = bool(equal) and name.endswith("+")
    if appending:
        name = name[:-1]
    if not _is_valid_name(name):
        _err(f"export: `{arg}': not a valid identifier\n")
        return 1
    if appending:
        shell.env.append(name, value)
    else:
        shell.env.add(name, value if equal else None)
    return 0


def _print_export(shell: Shell) -> None:
    for var in shell.env:
        line = f"declare -x {var.key}"
        if var.value is not None:
            line += f'="{var.value}"'
        _out(line + "\n")


def builtin_export(argv: Sequence[str], shell: Shell) -> int:
    """Set variables from ``NAME[=value]`` or ``NAME+=value``; list them without arguments."""
    if not argv:
        return _bad_argument("export")
    args = list(argv[1:])
    status = _reject_options("export", args)
    if status is not None:
        return status
    if not args:
        _print_export(shell)
        return 0
    first_error = 0
    for arg in args:
        result = _add_export(arg, shell)
        if result and not first_error:
            first_error = result
    return first_error


def builtin_pwd(argv: Sequence[str], shell: Shell) -> int:
    """Print the current working directory."""
    if not argv:
        return _bad_argument("pwd")
    status = _reject_options("pwd", list(argv[1:]))
    if status is not None:
        return status
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _err(f"pwd: {exc.strerror}\n")
        return 1
    _out(f"{cwd}\n")
    return 0


def builtin_unset(argv: Sequence[str], shell: Shell) -> int:
    """Remove each named variable."""
    if not argv or shell is None:
        return _bad_argument("unset")
    args = list(argv[1:])
    status = _reject_options("unset", args)
    if status is not None:
        return status
    for name in args:
        shell.env.erase(name)
    return 0


_BUILTINS: dict[str, Builtin] = {
    "cd": builtin_cd,
    "echo": builtin_echo,
    "env": builtin_env,
    "exit": builtin_exit,
    "export": builtin_export,
    "pwd": builtin_pwd,
    "unset": builtin_unset,
}


def lookup(name: str) -> Optional[Builtin]:
    """The builtin called ``name``, or None if it is not one."""
    return _BUILTINS.get(name)