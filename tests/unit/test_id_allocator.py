"""Unit tests for the per-kind identifier allocator."""

import threading

from opstrack.domain.entities import EntityKind
from opstrack.infrastructure.memory import IdAllocator


def test_sequences_start_at_one_per_kind():
    allocator = IdAllocator()
    assert allocator.next_id(EntityKind.LEAD) == 1
    assert allocator.next_id(EntityKind.LEAD) == 2
    assert allocator.next_id(EntityKind.TENDER) == 1
    assert allocator.issued(EntityKind.LEAD) == 2
    assert allocator.issued(EntityKind.PROJECT) == 0


def test_separate_allocators_do_not_share_sequences():
    first, second = IdAllocator(), IdAllocator()
    first.next_id(EntityKind.USER)
    first.next_id(EntityKind.USER)
    assert second.next_id(EntityKind.USER) == 1


def test_concurrent_calls_never_issue_the_same_id():
    allocator = IdAllocator()
    issued: list[int] = []
    lock = threading.Lock()

    def worker():
        for _ in range(200):
            value = allocator.next_id(EntityKind.DOCUMENT)
            with lock:
                issued.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(issued) == list(range(1, 1601))
