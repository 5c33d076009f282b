"""
Outcome classifiers.

A classifier looks at a result the operation returned and answers one
question: is this outcome transient? It never sees operation exceptions.
"""

from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, Iterable

from .config import DEFAULT_RETRYABLE_STATUS_CODES

OutcomeClassifier = Callable[[Any], bool]


@dataclass(frozen=True)
class StatusCodeClassifier:
    """Treat a result as transient when its `status_code` is in a fixed set."""

    status_codes: FrozenSet[int]

    @classmethod
    def of(cls, status_codes: Iterable[int]) -> "StatusCodeClassifier":
        return cls(frozenset(int(code) for code in status_codes))

    def __call__(self, result: Any) -> bool:
        return result.status_code in self.status_codes


is_transient_status = StatusCodeClassifier(DEFAULT_RETRYABLE_STATUS_CODES)
