"""Shell environment variables and the validation rules around them."""

from __future__ import annotations

import os
import string
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

__all__ = [
    "EnvVar",
    "Environment",
    "split_assignment",
    "is_plus_equal",
    "is_valid_export",
    "is_positive_llong",
    "is_negative_llong",
]

LLONG_MAX = (1 << 63) - 1

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_DIGITS = frozenset(string.digits)


def split_assignment(text: str) -> tuple[str, Optional[str]]:
    """Split ``KEY=VALUE`` (or ``KEY+=VALUE``) into its key and value.

    The value is None when *text* holds no ``=``. A ``+`` directly before
    the first ``=`` is not part of the key.
    """
    key, sep, value = text.partition("=")
    if not sep:
        return key, None
    if key.endswith("+"):
        key = key[:-1]
    return key, value


def is_plus_equal(text: str) -> bool:
    """Tell whether *text* is an identifier followed by ``+=``."""
    for index, char in enumerate(text):
        if char == "+":
            return text[index + 1:index + 2] == "="
        if char not in _NAME_CHARS:
            return False
    return False


def is_valid_export(text: Optional[str]) -> bool:
    """Tell whether *text* is an acceptable argument to ``export``."""
    if not text or text[0] in _DIGITS:
        return False
    for index, char in enumerate(text):
        if char == "+":
            return text[index + 1:index + 2] == "="
        if char == "=":
            return True
        if char not in _NAME_CHARS:
            return False
    return True


def is_positive_llong(text: str) -> bool:
    """Tell whether *text* is an unsigned or ``+`` number within a signed 64-bit range."""
    if text.startswith("+") and len(text) > 1:
        digits = text[1:]
    elif text[:1] in _DIGITS:
        digits = text
    else:
        return False
    if not all(char in _DIGITS for char in digits):
        return False
    return int(digits) <= LLONG_MAX


def is_negative_llong(text: str) -> bool:
    """Tell whether *text* is a ``-`` followed only by digits.

    A lone ``-`` counts as negative, and no range check is made.
    """
    if not text.startswith("-"):
        return False
    return all(char in _DIGITS for char in text[1:])


@dataclass
class EnvVar:
    """One environment variable; *value* is None when it has none."""

    key: str
    value: Optional[str] = None

    def entry(self) -> str:
        """Return the ``KEY=VALUE`` form of the variable."""
        if self.value is None:
            return self.key
        return f"{self.key}={self.value}"


class Environment:
    """An ordered collection of environment variables keyed by name."""

    def __init__(self, variables: Iterable[EnvVar] = ()) -> None:
        self._vars: list[EnvVar] = [EnvVar(var.key, var.value) for var in variables]

    @classmethod
    def from_envp(cls, envp: Optional[Iterable[str]]) -> "Environment":
        """Build an environment from ``KEY=VALUE`` lines.

        With no lines at all, the environment starts with ``PWD`` set to
        the current directory.
        """
        lines = list(envp or ())
        if not lines:
            return cls([EnvVar("PWD", os.getcwd())])
        variables = []
        for line in lines:
            key, sep, value = line.partition("=")
            variables.append(EnvVar(key, value if sep else None))
        return cls(variables)

    def _find(self, key: str) -> Optional[EnvVar]:
        return next((var for var in self._vars if var.key == key), None)

    def get(self, key: str) -> Optional[str]:
        """Return the value of *key*, or None when it is unset or empty-valued."""
        var = self._find(key)
        return None if var is None else var.value

    def __contains__(self, key: object) -> bool:
        return any(var.key == key for var in self._vars)

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def set(self, key: str, value: Optional[str]) -> None:
        """Set *key* to *value*, adding it at the end if it is new."""
        var = self._find(key)
        if var is None:
            self._vars.append(EnvVar(key, value))
        else:
            var.value = value

    def append_value(self, key: str, value: str) -> None:
        """Append *value* to the current value of *key*, creating it if needed."""
        var = self._find(key)
        if var is None:
            self._vars.append(EnvVar(key, value))
        else:
            var.value = (var.value or "") + value

    def remove(self, key: str) -> bool:
        """Remove *key*; return whether it was present."""
        var = self._find(key)
        if var is None:
            return False
        self._vars.remove(var)
        return True

    def copy(self) -> "Environment":
        """Return an independent copy."""
        return Environment(self._vars)

    def env_lines(self) -> list[str]:
        """Return the lines ``env`` prints."""
        return [var.entry() for var in self._vars]

    def declare_lines(self) -> list[str]:
        """Return the lines ``export`` prints when given no arguments."""
        lines = []
        for var in self._vars:
            if var.value is None:
                lines.append(f"declare -x {var.key}")
            else:
                lines.append(f'declare -x {var.key}="{var.value}"')
        return lines