"""
Transient Faults - Services.

Callers that run their requests through a retry policy.
"""

from .fault_prone import FaultProneService

__all__ = [
    "FaultProneService",
]
