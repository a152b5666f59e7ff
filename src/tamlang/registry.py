# src/tamlang/registry.py
"""Flat, whole-program registry of declared variable names."""

from typing import Dict, Iterator, Tuple

from .error_reporter import UndeclaredVariableError


class DeclarationRegistry:
    """Names declared so far in one parse.

    There is a single namespace for the whole program: names are never
    removed and blocks do not open new scopes. Iteration follows the order
    in which names were first declared.
    """

    def __init__(self):
        self._names: Dict[str, int] = {}

    def declare(self, name: str, line: int = 0) -> bool:
        """Record *name*; returns False when it was already declared."""
        if name in self._names:
            return False
        self._names[name] = line
        return True

    def is_declared(self, name: str) -> bool:
        return name in self._names

    def require(self, token, filename=None) -> None:
        """Raise ``UndeclaredVariableError`` unless the token's name is declared."""
        if token.lexeme not in self._names:
            raise UndeclaredVariableError(token.lexeme, token.line, column=token.column, filename=filename)

    def declared_at(self, name: str) -> int:
        return self._names[name]

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._names)

    def __contains__(self, name) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self):
        return f"DeclarationRegistry({list(self._names)!r})"
