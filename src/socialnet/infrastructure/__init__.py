"""Infrastructure layer: concrete implementations of application ports."""

from socialnet.infrastructure.memory_repository import (
    InMemoryPostRepository,
    InMemoryProfileRepository,
)
from socialnet.infrastructure.persistence.json_snapshot import (
    JsonSnapshotStore,
    SnapshotDocument,
)

__all__ = [
    "InMemoryPostRepository",
    "InMemoryProfileRepository",
    "JsonSnapshotStore",
    "SnapshotDocument",
]
