"""The shell's environment: an ordered list of variables, some without a value.

A variable declared without a value (``export NAME``) is kept and shown by
``export`` but left out by ``env``. The helpers at the end fill in ``PATH``
from the system files when the inherited environment has none.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Mapping, Optional, Union

from minishell.libchar import isalnum, isalpha

_PROTECTED = "_"
_LINUX_ENVIRONMENT_FILE = "/etc/environment"
_MAC_PATHS_FILE = "/etc/paths"


class InvalidIdentifier(ValueError):
    """Raised when a word is not a valid variable name."""

    def __init__(self, word: str) -> None:
        super().__init__(f"`{word}': not a valid identifier")
        self.word = word


@dataclass
class EnvVar:
    """One variable; ``value`` is ``None`` when it was declared without one."""

    name: str
    value: Optional[str] = None

    @property
    def sort_key(self) -> str:
        """The name as it is written in an entry, ``=`` included when set."""
        return self.name if self.value is None else f"{self.name}="

    def __str__(self) -> str:
        return self.sort_key if self.value is None else f"{self.name}={self.value}"


def validate_name(word: str) -> int:
    """Return the length of the name part of *word* (up to ``=`` or the end).

    The name must start with a letter or ``_`` and continue with letters,
    digits or ``_``. Raises :class:`InvalidIdentifier` otherwise.
    """
    name, _, _ = word.partition("=")
    if not name:
        raise InvalidIdentifier(word)
    if not (name[0] == "_" or isalpha(name[0])):
        raise InvalidIdentifier(word)
    if not all(char == "_" or isalnum(char) for char in name[1:]):
        raise InvalidIdentifier(word)
    return len(name)


class Environment:
    """Variables in the order they were added."""

    def __init__(self, entries: Iterable[Union[EnvVar, tuple]] = ()) -> None:
        self._vars: List[EnvVar] = []
        for entry in entries:
            var = entry if isinstance(entry, EnvVar) else EnvVar(*entry)
            self.set(var.name, var.value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Optional[str]]) -> "Environment":
        """Build an environment from a name-to-value mapping."""
        return cls(EnvVar(name, value) for name, value in mapping.items())

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __contains__(self, name: object) -> bool:
        return any(var.name == name for var in self._vars)

    def _lookup(self, name: str) -> Optional[EnvVar]:
        return next((var for var in self._vars if var.name == name), None)

    def find(self, name: str) -> Optional[str]:
        """Value of *name*, or ``None`` when it is missing or has no value."""
        var = self._lookup(name)
        return None if var is None else var.value

    def update(self, name: str, value: Optional[str]) -> bool:
        """Change the value of an existing variable; never creates one.

        Returns whether the variable existed.
        """
        var = self._lookup(name)
        if var is None:
            return False
        var.value = value
        return True

    def set(self, name: str, value: Optional[str]) -> None:
        """Change *name* if it exists, otherwise append it.

        Raises :class:`InvalidIdentifier` for a name that is not valid.
        """
        if validate_name(name) != len(name):
            raise InvalidIdentifier(name)
        if not self.update(name, value):
            self._vars.append(EnvVar(name, value))

    def remove(self, name: str) -> bool:
        """Remove *name*; the ``_`` variable cannot be removed.

        Returns whether a variable was removed.
        """
        if name == _PROTECTED:
            return False
        for index, var in enumerate(self._vars):
            if var.name == name:
                del self._vars[index]
                return True
        return False

    def sorted_copy(self) -> List[EnvVar]:
        """Copies of all variables, ordered by their written names."""
        return [EnvVar(var.name, var.value) for var in sorted(self._vars, key=lambda v: v.sort_key)]

    def export_lines(self) -> List[str]:
        """Lines printed by ``export`` without arguments.

        Values are double-quoted with ``$`` and ``"`` escaped; ``_`` is left out.
        """
        lines = []
        for var in self.sorted_copy():
            if var.name == _PROTECTED and var.value is not None:
                continue
            line = f"declare -x {var.sort_key}"
            if var.value is not None:
                escaped = "".join("\\" + ch if ch in '$"' else ch for ch in var.value)
                line += f'"{escaped}"'
            lines.append(line)
        return lines

    def env_lines(self) -> List[str]:
        """Lines printed by ``env``: ``NAME=value`` for variables with a value."""
        return [str(var) for var in self._vars if var.value is not None]


def _has_usable_path(env: Environment) -> bool:
    return bool(env.find("PATH"))


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        return text[1:-1]
    return text


def load_path_from_environment_file(
    env: Environment, path: Union[str, Path] = _LINUX_ENVIRONMENT_FILE
) -> Optional[str]:
    """Fill in ``PATH`` from a ``NAME="value"`` file when it is missing or empty.

    The last ``PATH=`` line wins. An unreadable file changes nothing.
    Returns the ``PATH`` value in effect afterwards.
    """
    if _has_usable_path(env):
        return env.find("PATH")
    try:
        text = Path(path).read_text()
    except OSError:
        return env.find("PATH")
    for line in text.splitlines():
        if line.startswith("PATH="):
            env.set("PATH", _unquote(line[len("PATH="):]))
    return env.find("PATH")


def load_path_from_paths_file(
    env: Environment, path: Union[str, Path] = _MAC_PATHS_FILE
) -> Optional[str]:
    """Fill in ``PATH`` from a file holding one directory per line.

    Each line read is put in front of those read before it, joined by ``:``.
    A missing or unreadable file gives an empty ``PATH``. Returns the
    ``PATH`` value in effect afterwards.
    """
    if _has_usable_path(env):
        return env.find("PATH")
    try:
        lines = Path(path).read_text().splitlines()
    except OSError:
        lines = []
    joined = ""
    for line in lines:
        joined = f"{line}:{joined}" if joined else line
    env.set("PATH", joined)
    return env.find("PATH")