"""The commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, TextIO

from minish.environment import Environment, is_valid_key

BUILTINS = frozenset({"echo", "cd", "pwd", "export", "unset", "env", "exit"})

# Size of the buffer the working directory must fit in, terminator included.
_CWD_LIMIT = 1024


class ShellExit(Exception):
    """Raised when the shell is asked to terminate with ``status``."""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"exit {status}")


def _out(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stdout


def _err(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stderr


def is_builtin(name: Optional[str]) -> bool:
    """Return True when ``name`` is one of the shell's own commands."""
    return name in BUILTINS


def echo(
    env: Environment,
    args: Sequence[str],
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Print the arguments separated by spaces.

    A leading ``-n`` drops the final newline; a second ``-n`` is an error.
    ``$NAME`` prints the variable's value and a word starting with ``~``
    prints ``HOME``.
    """
    out = _out(stdout)
    words = list(args[1:])
    new_line = True
    if words and words[0] == "-n":
        new_line = False
        words = words[1:]
        if words and words[0] == "-n":
            _err(stderr).write("minishell: echo: cannot be repeated '-n'\n")
            return 1
    rendered = []
    for word in words:
        if word.startswith("$"):
            rendered.append(env.get(word[1:]) or "")
        elif word.startswith("~"):
            rendered.append(env.get("HOME") or "")
        else:
            rendered.append(word)
    out.write(" ".join(rendered))
    if new_line:
        out.write("\n")
    return 0


def print_env(env: Environment, stdout: Optional[TextIO] = None) -> int:
    """Print every variable that has a value as ``KEY=VALUE``."""
    _out(stdout).write(env.format())
    return 0


def _current_directory() -> str:
    cwd = os.getcwd()
    if len(cwd) + 1 > _CWD_LIMIT:
        raise OSError("Numerical result out of range")
    return cwd


def pwd(stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Print the current working directory."""
    try:
        cwd = _current_directory()
    except OSError as exc:
        _err(stderr).write(f"getcwd: {exc}\n")
        return 1
    _out(stdout).write(f"{cwd}\n")
    return 0


def _update_pwds(env: Environment, stderr: Optional[TextIO]) -> int:
    old = env.get("PWD")
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _err(stderr).write(f"cd: error retrieving current directory: {exc}\n")
        return 1
    if old is not None:
        env.set("OLDPWD", old)
    env.set("PWD", cwd)
    return 0


def cd(
    env: Environment,
    args: Sequence[str],
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Change directory and update ``PWD`` and ``OLDPWD``.

    No argument or ``~`` goes to ``HOME``; ``-`` goes to ``OLDPWD`` and
    prints the new directory.
    """
    err = _err(stderr)
    target = args[1] if len(args) > 1 else None
    if target is None or target == "~":
        path = env.get("HOME")
    elif target == "-":
        path = env.get("OLDPWD")
    else:
        path = target
    if path is None:
        err.write("minishell: cd: HOME not set\n")
        return 1
    if not os.path.exists(path):
        err.write(f"minishell: cd: {path}: No such file or directory\n")
        return 1
    try:
        os.chdir(path)
    except OSError as exc:
        err.write(f"minishell: cd: {exc.strerror or exc}\n")
        return 1
    status = _update_pwds(env, stderr)
    if target == "-" and status == 0:
        _out(stdout).write(f"{env.get('PWD')}\n")
    return status


def export(
    env: Environment,
    args: Sequence[str],
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Set variables given as ``KEY=VALUE``; without arguments list them sorted."""
    if len(args) < 2:
        out = _out(stdout)
        for entry in env.sorted_entries():
            out.write(f"declare -x {entry}\n")
        return 0
    status = 0
    for arg in args[1:]:
        key, sep, value = arg.partition("=")
        if not is_valid_key(key):
            _err(stderr).write(f"minishell: export: `{arg}`: not a valid identifier\n")
            status = 1
        elif sep:
            env.set(key, value)
    return status


def unset(env: Environment, args: Sequence[str], stderr: Optional[TextIO] = None) -> int:
    """Remove the named variables; invalid names are reported."""
    status = 0
    for name in args[1:]:
        if not is_valid_key(name):
            _err(stderr).write(f"minishell: unset: `{name}': not a valid identifier\n")
            status = 1
        else:
            env.unset(name)
    return status


def _is_numeric(text: str) -> bool:
    return all(
        ("0" <= ch <= "9") or (index == 0 and ch in "+-")
        for index, ch in enumerate(text)
    )


def _to_int(text: str) -> int:
    sign = 1
    digits = text
    if digits[:1] in ("+", "-"):
        sign = -1 if digits[0] == "-" else 1
        digits = digits[1:]
    return sign * int(digits) if digits else 0


def exit_builtin(args: Sequence[str], stderr: Optional[TextIO] = None) -> int:
    """Leave the shell by raising ShellExit.

    Returns 1 without leaving when given more than one argument.
    """
    err = _err(stderr)
    err.write("exit\n")
    if len(args) < 2:
        raise ShellExit(0)
    if not _is_numeric(args[1]):
        err.write("minishell: exit: numeric argument required\n")
        raise ShellExit(255)
    if len(args) > 2:
        err.write("minishell: exit: too many arguments\n")
        return 1
    raise ShellExit(_to_int(args[1]) % 256)