"""Per-collection identifier allocation for the in-memory store."""

import threading
from collections import defaultdict

from opstrack.domain.entities import EntityKind


class IdAllocator:
    """Issues 1, 2, 3, ... independently for each entity kind.

    IDs are never recycled: after N calls for a kind, exactly the integers
    1..N have been issued, whatever was deleted in between. Each store owns
    its own allocator, so separate stores never share a sequence.
    """

    def __init__(self) -> None:
        self._issued: defaultdict[EntityKind, int] = defaultdict(int)
        self._lock = threading.Lock()

    def next_id(self, kind: EntityKind) -> int:
        with self._lock:
            self._issued[kind] += 1
            return self._issued[kind]

    def issued(self, kind: EntityKind) -> int:
        """Number of IDs handed out so far for ``kind``."""
        with self._lock:
            return self._issued[kind]
