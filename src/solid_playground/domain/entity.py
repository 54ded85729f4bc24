"""Identity-based equality for ledger accounts and other aggregates."""
from __future__ import annotations


class Entity:
    def __init__(self, id: str) -> None:
        if not id:
            raise ValueError(f"{type(self).__name__} needs a non-empty id")
        self.id = id

    def __eq__(self, other: object) -> bool:
        # equal ids on different types are different things
        return type(other) is type(self) and other.id == self.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"
