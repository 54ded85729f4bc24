from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ValueObject:
    """Immutable value; snapshots handed to sinks derive from it."""

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
