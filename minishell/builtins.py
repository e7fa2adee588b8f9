"""Builtin commands that act on the shell's own state: echo, env, export, unset, pwd.

Each builtin takes the full argument list, command name first, writes
to the shell's output streams and returns its exit status. It also
records that status and the last argument in ``_``, as the shell does
after every command.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Optional, Sequence, TextIO

from minishell.environment import Environment, InvalidIdentifier, validate_name

_LAST_ARG = "_"
_SLASH_RUN = re.compile(r"/+")


def is_n_flag(word: str) -> bool:
    """True when *word* is ``-`` followed by one or more ``n`` and nothing else."""
    return len(word) >= 2 and word[0] == "-" and set(word[1:]) == {"n"}


def clean_path(path: str) -> str:
    """Collapse runs of ``/`` into one and drop trailing slashes.

    A path made only of slashes becomes ``/``.
    """
    collapsed = _SLASH_RUN.sub("/", path)
    if collapsed != "/":
        collapsed = collapsed.rstrip("/")
    return collapsed


def exit_with_message(
    message: str,
    detail: Optional[str] = None,
    suffix: Optional[str] = None,
    code: int = 0,
) -> None:
    """Print an exit message and leave with *code*.

    A plain ``exit`` line goes to standard output; anything else, and the
    optional *detail* and *suffix*, go to standard error. Always raises
    :class:`SystemExit`.
    """
    if "exit\n".startswith(message):
        sys.stdout.write(message)
    else:
        sys.stderr.write(message)
    if detail is not None:
        sys.stderr.write(detail)
    if suffix is not None:
        sys.stderr.write(suffix)
    sys.stdout.flush()
    sys.stderr.flush()
    raise SystemExit(code)


class Shell:
    """State shared by the builtins: environment, streams and last status."""

    def __init__(
        self,
        env: Optional[Environment] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.env = env if env is not None else Environment()
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.last_return = 0
        # Logical working directory as reached through symbolic links, if any.
        self.logical_cwd: Optional[str] = None

    def set_last_arg(self, args: Sequence[str]) -> None:
        """Store the last of *args* in ``_``, or an empty string when there are none."""
        self.env.set(_LAST_ARG, args[-1] if args else "")

    def set_last_return(self, value: int) -> None:
        """Record *value* as the exit status of the last command."""
        self.last_return = value

    def _finish(self, args: Sequence[str], status: int) -> int:
        self.set_last_return(status)
        self.set_last_arg(args)
        return status

    def _identifier_error(self, command: str, error: InvalidIdentifier) -> None:
        self.stderr.write(f"minishell: {command}: {error}\n")
        self.set_last_return(1)

    def echo(self, args: Sequence[str]) -> int:
        """Print the arguments separated by spaces; leading ``-n`` flags drop the newline."""
        words = list(args[1:])
        newline = True
        while words and is_n_flag(words[0]):
            newline = False
            words.pop(0)
        self.stdout.write(" ".join(words))
        if newline:
            self.stdout.write("\n")
        return self._finish(args, 0)

    def env(self, args: Sequence[str]) -> int:
        """Print every variable that has a value, in the order they were set."""
        status = self._finish(args, 0)
        for line in self.env.env_lines():
            self.stdout.write(f"{line}\n")
        return status

    def export(self, args: Sequence[str]) -> int:
        """Set variables, or list them all sorted when no argument is given."""
        self.set_last_return(0)
        if len(args) < 2:
            self.set_last_arg(args)
            for line in self.env.export_lines():
                self.stdout.write(f"{line}\n")
            return self.last_return
        for word in args[1:]:
            try:
                validate_name(word)
            except InvalidIdentifier as error:
                self._identifier_error("export", error)
                continue
            name, equals, value = word.partition("=")
            if equals:
                self.env.set(name, value)
            elif name not in self.env:
                self.env.set(name, None)
        status = self.last_return
        self.set_last_arg(args)
        return status

    def unset(self, args: Sequence[str]) -> int:
        """Remove the named variables; ``_`` is never removed."""
        self._finish(args, 0)
        for word in args[1:]:
            try:
                length = validate_name(word)
            except InvalidIdentifier as error:
                self._identifier_error("unset", error)
                continue
            if length == len(word):
                self.env.remove(word)
        return self.last_return

    def pwd(self, args: Sequence[str]) -> int:
        """Print the working directory, preferring the logical one."""
        status = self._finish(args, 0)
        current = self.logical_cwd if self.logical_cwd is not None else os.getcwd()
        self.stdout.write(f"{current}\n")
        return status