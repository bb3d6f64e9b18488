"""The shell's built-in commands: cd, echo, exit, export, pwd, unset and env.

Every built-in takes the arguments that follow the command name, writes
its output to the state's streams, records the resulting exit status on
the state and returns it. ``exit`` ends the shell by raising
:class:`ShellExit`.
"""

from __future__ import annotations

import os
import sys
from typing import Iterable, Optional, Sequence, TextIO

from .cstrings import atoll
from .environment import (
    Environment,
    is_negative_llong,
    is_plus_equal,
    is_positive_llong,
    is_valid_export,
    split_assignment,
)

__all__ = [
    "ShellExit",
    "ShellState",
    "cd",
    "echo",
    "exit_builtin",
    "export",
    "pwd",
    "unset",
    "env",
]

# Status used by ``exit`` for any negative numeric argument.
_NEGATIVE_EXIT_STATUS = 156


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with *status*."""

    def __init__(self, status: int) -> None:
        super().__init__(f"shell exited with status {status}")
        self.status = status


class ShellState:
    """What the built-ins work on.

    *env* holds the variables handed to commands; *exported* holds the
    variables ``export`` lists, which may include names that have no value
    in *env*.
    """

    def __init__(
        self,
        env: Environment,
        exported: Optional[Environment] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self.env = env
        self.exported = env.copy() if exported is None else exported
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err
        self.status = 0

    @classmethod
    def from_envp(
        cls,
        envp: Optional[Iterable[str]],
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> "ShellState":
        """Build a state from ``KEY=VALUE`` lines."""
        environment = Environment.from_envp(envp)
        return cls(environment, environment.copy(), out, err)

    def _finish(self, status: int) -> int:
        self.status = status
        return status


def _current_directory(state: ShellState, fallback_key: str) -> Optional[str]:
    """Return the working directory, falling back to *fallback_key* in env."""
    try:
        return os.getcwd()
    except OSError:
        value = state.env.get(fallback_key)
        if value is None:
            state.err.write(
                "Error, getcwd return (null, and impossible to find key in env."
            )
            state.status = 1
        return value


def _set_both(state: ShellState, key: str, value: str) -> None:
    state.env.set(key, value)
    state.exported.set(key, value)


def cd(args: Sequence[str], state: ShellState) -> int:
    """Change the working directory and update ``PWD`` and ``OLDPWD``."""
    if len(args) > 1:
        state.err.write("Minishell: cd: too many arguments\n")
        return state._finish(1)
    if not args or args[0].startswith("~"):
        path = state.env.get("HOME")
        if path is None:
            state.err.write("Minishell: cd: HOME not set\n")
            return state._finish(1)
    else:
        path = args[0]
    old = _current_directory(state, "PWD")
    if old is None:
        return state._finish(1)
    try:
        os.chdir(path)
    except OSError:
        state.err.write(f"Minishell: cd: {path}: No such file or directory\n")
        return state._finish(1)
    _set_both(state, "OLDPWD", old)
    new = _current_directory(state, "OLDPWD")
    if new is None:
        return state._finish(1)
    _set_both(state, "PWD", new)
    return state._finish(0)


def echo(args: Sequence[str], state: ShellState) -> int:
    """Print the arguments separated by spaces; leading ``-n`` drops the newline."""
    words = list(args)
    newline = True
    while words and words[0] == "-n":
        newline = False
        words.pop(0)
    state.out.write(" ".join(words))
    if newline:
        state.out.write("\n")
    return state._finish(0)


def _leave(state: ShellState, status: int) -> None:
    state.status = status
    raise ShellExit(status)


def exit_builtin(args: Sequence[str], state: ShellState) -> int:
    """End the shell, or report an error and return when given too many arguments."""
    if not args:
        state.out.write("exit\n")
        _leave(state, 0)
    if len(args) > 1:
        state.err.write(" too many arguments\n")
        return state._finish(1)
    argument = args[0]
    if is_positive_llong(argument):
        state.out.write("exit\n")
        _leave(state, atoll(argument) & 0xFF)
    if is_negative_llong(argument):
        state.out.write("exit\n")
        _leave(state, _NEGATIVE_EXIT_STATUS)
    state.out.write(f"exit\nbash: exit: {argument}: numeric argument required\n")
    _leave(state, 2)
    return state.status


def _export_one(argument: str, state: ShellState) -> bool:
    if not is_valid_export(argument):
        state.err.write(f"minishell: export: {argument}: not a valid identifier\n")
        return False
    key, value = split_assignment(argument)
    if is_plus_equal(argument):
        state.env.append_value(key, value or "")
        state.exported.append_value(key, value or "")
    elif not value:
        if key not in state.env:
            state.exported.set(key, "")
    else:
        _set_both(state, key, value)
    return True


def export(args: Sequence[str], state: ShellState) -> int:
    """Set or list exported variables; stop at the first invalid name."""
    if not args:
        for line in state.exported.declare_lines():
            state.out.write(line + "\n")
        return state._finish(0)
    for argument in args:
        if not _export_one(argument, state):
            return state._finish(1)
    return state._finish(0)


def pwd(state: ShellState) -> int:
    """Print the working directory."""
    current = _current_directory(state, "PWD")
    if current is None:
        return state.status
    state.out.write(current + "\n")
    return state._finish(0)


def unset(args: Sequence[str], state: ShellState) -> int:
    """Remove each named variable from both environments."""
    for key in args:
        state.env.remove(key)
        state.exported.remove(key)
    return state.status


def env(state: ShellState) -> int:
    """Print every variable of the environment as ``KEY=VALUE``."""
    for line in state.env.env_lines():
        state.out.write(line + "\n")
    return state._finish(0)