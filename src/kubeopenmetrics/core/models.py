"""Core domain models for resource lists and metric samples."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class InvolvedObject:
    """The resource a Kubernetes event is about.

    Attributes:
        kind: Resource kind (e.g., Pod).
        namespace: Namespace of the resource.
        name: Name of the resource.
    """

    kind: str
    namespace: str = ""
    name: str = ""


@dataclass(frozen=True)
class ResourceRecord:
    """A single decoded item of a resource or event list.

    Attributes:
        kind: Resource kind tag (e.g., Pod, Deployment, Service).
        involved_object: For events, the resource the event refers to.
    """

    kind: str = ""
    involved_object: InvolvedObject | None = None


@dataclass(frozen=True)
class ResourceCollection:
    """Ordered, immutable sequence of decoded records."""

    records: tuple[ResourceRecord, ...] = ()

    @classmethod
    def of(cls, records: Iterable[ResourceRecord]) -> "ResourceCollection":
        return cls(records=tuple(records))

    def __iter__(self) -> Iterator[ResourceRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class NamespaceStats:
    """Per-kind resource counts for one namespace.

    The mapping always holds exactly the tracked kinds it was created with.
    Counts start at zero and only ever go up.

    Attributes:
        namespace: Namespace the counts belong to.
        counts: Mapping of resource kind to count.
    """

    namespace: str
    counts: dict[str, int] = field(default_factory=dict)

    @classmethod
    def for_kinds(cls, namespace: str, kinds: Iterable[str]) -> "NamespaceStats":
        """Create stats with every tracked kind set to zero."""
        return cls(namespace=namespace, counts=dict.fromkeys(kinds, 0))

    def increment(self, kind: str) -> bool:
        """Count one resource of the given kind.

        Returns:
            True if the kind is tracked and was counted, False otherwise.
        """
        if kind not in self.counts:
            return False
        self.counts[kind] += 1
        return True


@dataclass(frozen=True)
class MetricSample:
    """A single metric sample ready for exposition.

    Attributes:
        name: Metric name (e.g., pods).
        type: Metric type, always gauge here.
        help: Human readable description used for the HELP line.
        value: The metric value.
        labels: Key-value pairs for metric dimensions.
        timestamp: Unix timestamp in nanoseconds, if any.
    """

    name: str
    help: str
    value: int | float
    type: str = "gauge"
    labels: Mapping[str, str] = field(default_factory=dict)
    timestamp: int | None = None
