"""Check result value object."""

import copy
import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


class Status(str, enum.Enum):
    """Verdict of a single check (and of a whole analysis)."""

    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


@dataclass(frozen=True)
class Result:
    """
    Immutable verdict returned by every check.

    `details` carries rule-specific facts (counts, lengths, missing tags).
    The mapping itself is read-only, but the guard is shallow: nested lists
    and dicts are private copies, not frozen. `to_dict()` hands out another
    deep copy, so callers can never reach the stored values.

    `weight` is the check's contribution to the composite score and is
    clamped to [0, 1].
    """

    status: Status
    details: Mapping[str, Any] = field(default_factory=dict)
    message: str = ""
    weight: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", Status(self.status))
        object.__setattr__(self, "details", MappingProxyType(copy.deepcopy(dict(self.details))))
        object.__setattr__(self, "weight", min(1.0, max(0.0, float(self.weight))))

    @property
    def fix_hint(self) -> str:
        """Hint shown next to the check in the UI."""
        return self.message

    def to_dict(self) -> dict:
        """Plain-dict representation for API and task payloads."""
        return {
            "status": self.status.value,
            "details": copy.deepcopy(dict(self.details)),
            "message": self.message,
            "fix_hint": self.fix_hint,
            "weight": self.weight,
        }
