"""Shared fixtures: a deterministic clock and a fresh in-memory store per test."""

from datetime import datetime, timedelta, timezone

import pytest

from opstrack.application.interfaces import EntityStore
from opstrack.application.services import AuditedMutations, AuditTrailRecorder, MutationFacade
from opstrack.infrastructure.memory import build_memory_store

T0 = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


class FakeClock:
    """Returns T0, T0 + step, T0 + 2*step, ... on successive calls."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        self.calls += 1
        return value


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> EntityStore:
    return build_memory_store(clock)


@pytest.fixture
def facade(store: EntityStore) -> MutationFacade:
    return MutationFacade(store)


@pytest.fixture
def recorder(store: EntityStore) -> AuditTrailRecorder:
    return AuditTrailRecorder(store.activities)


@pytest.fixture
def mutations(facade: MutationFacade, recorder: AuditTrailRecorder) -> AuditedMutations:
    return AuditedMutations(facade, recorder, default_actor_id=1)
