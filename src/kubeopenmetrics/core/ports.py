"""Port interfaces for the collaborators of the conversion pipeline.

The core depends only on these protocols. Concrete implementations live in
``kubeopenmetrics.adapters`` (or in the calling program).
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of the current time for event timestamps."""

    def now_ns(self) -> int:
        """Return the current Unix time in nanoseconds."""
        ...


@runtime_checkable
class ErrorReporter(Protocol):
    """Receives decode failures.

    Implementations must not raise.
    """

    def __call__(self, error: Exception) -> None: ...


@runtime_checkable
class ResourceFetcher(Protocol):
    """Supplies the raw JSON resource list, e.g. from ``kubectl get -o json``.

    Provided for callers only: nothing in this package implements or calls
    it. Callers fetch the document themselves and pass the string to
    ``convert``.
    """

    def fetch(self, namespace: str) -> str:
        """Return the resource list of a namespace as a JSON string."""
        ...
