"""
Tests for ContractReader.

Tests cover:
- Each query's happy path and argument order
- Owner defaulting to the session account
- Short-circuit without network calls (no contract / no owner)
- Transport failures and timeouts degrade to neutral defaults
- try_* variants preserve the failure reason
- Cache scoping to the last queried owner
"""

import pytest

from record_platform import (
    ChildRecord,
    ContractNotConfiguredError,
    ContractReader,
    MissingOwnerError,
    NetworkResolver,
    ReadError,
    ReadTimeoutError,
    StateStore,
    StaticSession,
)
from record_platform.constants import ZERO_ADDRESS

from .conftest import (
    CHILD_A,
    CHILD_B,
    CONTRACT,
    LOCAL,
    OTHER_OWNER,
    OWNER,
    UNKNOWN_NETWORK,
    StubReadTransport,
)


def _reader(resolver, transport, store, account=OWNER, network_id=LOCAL, timeout=30.0):
    return ContractReader(
        resolver=resolver,
        network_id=network_id,
        session=StaticSession(account=account),
        transport=transport,
        store=store,
        timeout=timeout,
    )


# =============================================================================
# Happy path
# =============================================================================


class TestQueries:
    """Tests for successful queries."""

    @pytest.mark.asyncio
    async def test_fetch_list_replaces_cache(
        self, reader: ContractReader, read_transport: StubReadTransport, store: StateStore
    ) -> None:
        children = await reader.fetch_list()

        assert children == [ChildRecord(account=CHILD_A, role="admin")]
        assert store.children == (ChildRecord(account=CHILD_A, role="admin"),)
        assert store.owner == OWNER
        assert read_transport.calls == [(CONTRACT, "getChildren", [OWNER])]

    @pytest.mark.asyncio
    async def test_fetch_list_accepts_dict_structs(self, resolver, store) -> None:
        transport = StubReadTransport(
            {"getChildren": [{"childEOA": CHILD_A, "role": "admin"}, {"childEOA": CHILD_B, "role": "ops"}]}
        )
        children = await _reader(resolver, transport, store).fetch_list()
        assert [c.role for c in children] == ["admin", "ops"]

    @pytest.mark.asyncio
    async def test_explicit_owner_overrides_session(
        self, reader: ContractReader, read_transport: StubReadTransport, store: StateStore
    ) -> None:
        await reader.fetch_list(OTHER_OWNER)

        assert read_transport.calls[-1] == (CONTRACT, "getChildren", [OTHER_OWNER])
        assert store.owner == OTHER_OWNER

    @pytest.mark.asyncio
    async def test_explicit_zero_address_owner_is_queried(
        self, reader: ContractReader, read_transport: StubReadTransport, store: StateStore
    ) -> None:
        await reader.fetch_list(ZERO_ADDRESS)

        assert read_transport.calls == [(CONTRACT, "getChildren", [ZERO_ADDRESS])]
        assert store.owner == ZERO_ADDRESS

    @pytest.mark.asyncio
    async def test_lookup_by_role(
        self, reader: ContractReader, read_transport: StubReadTransport
    ) -> None:
        assert await reader.lookup_by_role("admin") == CHILD_A
        assert read_transport.calls[-1] == (CONTRACT, "getChildByRole", [OWNER, "admin"])

    @pytest.mark.asyncio
    async def test_lookup_by_role_zero_address_is_none(self, resolver, store) -> None:
        transport = StubReadTransport({"getChildByRole": ZERO_ADDRESS})
        assert await _reader(resolver, transport, store).lookup_by_role("admin") is None

    @pytest.mark.asyncio
    async def test_count(self, reader: ContractReader, read_transport: StubReadTransport) -> None:
        assert await reader.count() == 1
        assert read_transport.calls[-1] == (CONTRACT, "getChildrenCount", [OWNER])

    @pytest.mark.asyncio
    async def test_count_beyond_64_bits_is_exact(self, resolver, store) -> None:
        huge = 2**200 + 7
        transport = StubReadTransport({"getChildrenCount": huge})
        assert await _reader(resolver, transport, store).count() == huge

    @pytest.mark.asyncio
    async def test_is_member(self, reader: ContractReader, read_transport: StubReadTransport) -> None:
        assert await reader.is_member(CHILD_A) is True
        assert read_transport.calls[-1] == (CONTRACT, "isChildOf", [OWNER, CHILD_A])


# =============================================================================
# Short-circuits
# =============================================================================


class TestShortCircuit:
    """Tests for queries that never reach the transport."""

    @pytest.mark.asyncio
    async def test_unconfigured_network_returns_defaults(self, resolver, store) -> None:
        transport = StubReadTransport({"getChildren": [(CHILD_A, "admin")]})
        reader = _reader(resolver, transport, store, network_id=UNKNOWN_NETWORK)

        assert await reader.fetch_list() == []
        assert await reader.lookup_by_role("admin") is None
        assert await reader.count() == 0
        assert await reader.is_member(CHILD_A) is False
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_unconfigured_network_reason(self, resolver, store) -> None:
        reader = _reader(resolver, StubReadTransport(), store, network_id=UNKNOWN_NETWORK)
        result = await reader.try_count()
        assert not result.ok
        assert isinstance(result.error, ContractNotConfiguredError)

    @pytest.mark.asyncio
    async def test_missing_owner_returns_defaults(self, resolver, store) -> None:
        transport = StubReadTransport({"getChildren": [(CHILD_A, "admin")]})
        reader = _reader(resolver, transport, store, account=None)

        assert await reader.fetch_list() == []
        assert await reader.is_member(CHILD_A) is False
        result = await reader.try_lookup_by_role("admin")
        assert isinstance(result.error, MissingOwnerError)
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_short_circuit_leaves_cache_untouched(self, resolver, store) -> None:
        store.replace_children(OWNER, [ChildRecord(CHILD_B, "ops")])
        reader = _reader(resolver, StubReadTransport(), store, account=None)

        await reader.fetch_list()

        assert store.children == (ChildRecord(CHILD_B, "ops"),)


# =============================================================================
# Failures
# =============================================================================


class TestFailures:
    """Tests for transport failures and timeouts."""

    @pytest.mark.asyncio
    async def test_transport_error_degrades(self, resolver, store) -> None:
        boom = RuntimeError("execution reverted")
        transport = StubReadTransport(
            {
                "getChildren": boom,
                "getChildByRole": boom,
                "getChildrenCount": boom,
                "isChildOf": boom,
            }
        )
        reader = _reader(resolver, transport, store)

        assert await reader.fetch_list() == []
        assert await reader.lookup_by_role("admin") is None
        assert await reader.count() == 0
        assert await reader.is_member(CHILD_A) is False
        assert len(transport.calls) == 4

    @pytest.mark.asyncio
    async def test_try_variant_keeps_cause(self, resolver, store) -> None:
        boom = RuntimeError("execution reverted")
        reader = _reader(resolver, StubReadTransport({"getChildren": boom}), store)

        result = await reader.try_fetch_list()

        assert not result.ok
        assert isinstance(result.error, ReadError)
        assert result.error.__cause__ is boom
        assert result.error.details["function"] == "getChildren"

    @pytest.mark.asyncio
    async def test_failed_fetch_keeps_previous_cache(self, resolver, store) -> None:
        store.replace_children(OWNER, [ChildRecord(CHILD_B, "ops")])
        reader = _reader(resolver, StubReadTransport({"getChildren": RuntimeError("down")}), store)

        await reader.fetch_list()

        assert store.children == (ChildRecord(CHILD_B, "ops"),)

    @pytest.mark.asyncio
    async def test_decode_error_degrades(self, resolver, store) -> None:
        reader = _reader(resolver, StubReadTransport({"getChildrenCount": "not-a-number"}), store)
        result = await reader.try_count()
        assert isinstance(result.error, ReadError)
        assert await reader.count() == 0

    @pytest.mark.asyncio
    async def test_timeout_degrades(self, resolver, store) -> None:
        transport = StubReadTransport({"getChildrenCount": 5}, delay=1.0)
        reader = _reader(resolver, transport, store, timeout=0.01)

        result = await reader.try_count()

        assert isinstance(result.error, ReadTimeoutError)
        assert await reader.count() == 0

    @pytest.mark.asyncio
    async def test_transport_timeout_error_is_a_read_error(self, resolver, store) -> None:
        cause = TimeoutError("socket timed out")
        reader = _reader(resolver, StubReadTransport({"getChildrenCount": cause}), store)

        result = await reader.try_count()

        assert isinstance(result.error, ReadError)
        assert not isinstance(result.error, ReadTimeoutError)
        assert result.error.__cause__ is cause

    @pytest.mark.asyncio
    async def test_per_call_timeout_overrides_default(self, resolver, store) -> None:
        transport = StubReadTransport({"getChildrenCount": 5}, delay=0.05)
        reader = _reader(resolver, transport, store, timeout=0.01)

        assert await reader.count(timeout=None) == 5
