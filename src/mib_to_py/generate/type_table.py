"""Run-scoped registry of shared type declarations."""

from __future__ import annotations

from collections.abc import Iterator

from mib_to_py.models.types import TypeDefinition


class TypeTable:
    """Named custom types collected while emitting modules.

    One table lives for a whole run, across all modules. Types are only
    ever inserted if absent: when two nodes reference different shapes
    under the same name, the first one registered is kept and the later
    one is silently ignored. Entries are never replaced or removed.

    Usage:
        table = TypeTable()
        table.register(node.type)
        for type_def in table.sorted_types():
            ...
    """

    def __init__(self) -> None:
        """Initialize an empty table."""
        self._types: dict[str, TypeDefinition] = {}

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._types))

    def register(self, type_def: TypeDefinition) -> bool:
        """Register a type under its name unless the name is taken.

        Args:
        ----
            type_def: Named type definition.

        Returns:
        -------
            True if the type was inserted, False if the name was already
            registered.

        """
        name = type_def.name or ""
        if name in self._types:
            return False
        self._types[name] = type_def
        return True

    def get(self, name: str) -> TypeDefinition | None:
        """Return the registered type of a name, if any."""
        return self._types.get(name)

    def sorted_types(self) -> list[TypeDefinition]:
        """Return all registered types in lexicographic order of name."""
        return [self._types[name] for name in sorted(self._types)]
