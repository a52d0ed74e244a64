import asyncio

import pytest

from quickdesign.core.errors import (
    ContentGenerationError,
    EmptyInputError,
    GenerationInProgressError,
    NoDesignError,
    SessionNotFoundError,
)
from quickdesign.schemas.design import DesignType
from quickdesign.services import session_service
from quickdesign.services.session_service import SessionStore


@pytest.fixture
def calls(monkeypatch):
    """Replace the content requestor with a recorder that returns a sentinel design."""
    recorded = []

    async def fake_generate(text, design_type):
        recorded.append((text, design_type))
        return f"design-{len(recorded)}"

    monkeypatch.setattr(session_service, "generate_design_content", fake_generate)
    return recorded


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_input_never_reaches_the_service(calls, text):
    session = SessionStore().create()
    with pytest.raises(EmptyInputError):
        asyncio.run(session.generate(text, DesignType.POSTER))
    assert calls == []
    assert session.current_design is None


def test_success_replaces_design_and_type(calls):
    session = SessionStore().create()
    asyncio.run(session.generate("first", DesignType.POSTER))
    asyncio.run(session.generate("second", DesignType.BANNER))

    assert session.current_design == "design-2"
    assert session.design_type is DesignType.BANNER
    assert session.selected_type is DesignType.BANNER
    assert not session.is_generating


def test_failure_keeps_previous_design(calls, monkeypatch):
    session = SessionStore().create()
    asyncio.run(session.generate("first", DesignType.SOCIAL))

    async def failing(text, design_type):
        raise ContentGenerationError("boom")

    monkeypatch.setattr(session_service, "generate_design_content", failing)
    with pytest.raises(ContentGenerationError):
        asyncio.run(session.generate("second", DesignType.POSTER))

    assert session.current_design == "design-1"
    assert session.design_type is DesignType.SOCIAL
    assert not session.is_generating


def test_only_one_generation_in_flight(monkeypatch):
    release = asyncio.Event()

    async def slow(text, design_type):
        await release.wait()
        return "slow-design"

    monkeypatch.setattr(session_service, "generate_design_content", slow)
    session = SessionStore().create()

    async def scenario():
        first = asyncio.create_task(session.generate("first", DesignType.POSTER))
        await asyncio.sleep(0)
        assert session.is_generating
        with pytest.raises(GenerationInProgressError):
            await session.generate("second", DesignType.POSTER)
        release.set()
        return await first

    assert asyncio.run(scenario()) == "slow-design"
    assert not session.is_generating


def test_require_design_without_design():
    with pytest.raises(NoDesignError):
        SessionStore().create().require_design()


def test_store_lifecycle():
    store = SessionStore()
    session = store.create(DesignType.NAMECARD)
    assert store.get(session.session_id) is session
    assert len(store) == 1

    store.discard(session.session_id)
    assert len(store) == 0
    with pytest.raises(SessionNotFoundError):
        store.get(session.session_id)
    with pytest.raises(SessionNotFoundError):
        store.discard(session.session_id)


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_idle_sessions_expire():
    clock = FakeClock()
    store = SessionStore(ttl_s=60, clock=clock)
    stale = store.create()
    clock.now += 30
    fresh = store.create()

    clock.now += 45
    with pytest.raises(SessionNotFoundError):
        store.get(stale.session_id)
    assert store.get(fresh.session_id) is fresh
    assert len(store) == 1


def test_access_keeps_session_alive():
    clock = FakeClock()
    store = SessionStore(ttl_s=60, clock=clock)
    session = store.create()
    for _ in range(5):
        clock.now += 50
        assert store.get(session.session_id) is session


def test_generating_session_is_not_evicted():
    clock = FakeClock()
    store = SessionStore(ttl_s=60, clock=clock)
    busy = store.create()
    busy.is_generating = True

    clock.now += 600
    store.create()
    assert store.get(busy.session_id) is busy


def test_many_sessions_stay_bounded():
    clock = FakeClock()
    store = SessionStore(max_sessions=10, clock=clock)
    created = []
    for _ in range(500):
        clock.now += 1
        created.append(store.create())

    assert len(store) == 10
    # the most recently created ones survive
    for session in created[-10:]:
        assert store.get(session.session_id) is session
    with pytest.raises(SessionNotFoundError):
        store.get(created[0].session_id)
