"""
Shared fixtures and transport stubs for record_platform tests.
"""

import asyncio
from typing import Any, Dict, List, Optional, Sequence

import pytest

from record_platform import (
    ContractReader,
    ContractWriter,
    ControllerConfig,
    DEFAULT_NETWORKS,
    NetworkResolver,
    RecordPlatformController,
    StateStore,
    StaticSession,
)
from record_platform.constants import HARDHAT_CHAIN_ID


# =============================================================================
# Test Constants
# =============================================================================

CONTRACT = "0x" + "c" * 40
OWNER = "0x1234567890123456789012345678901234567890"
OTHER_OWNER = "0x9876543210987654321098765432109876543210"
CHILD_A = "0x" + "a" * 40
CHILD_B = "0x" + "b" * 40
TX_HASH = "0x" + "11" * 32
LOCAL = HARDHAT_CHAIN_ID
UNKNOWN_NETWORK = 424242


# =============================================================================
# Stubs
# =============================================================================


class StubReadTransport:
    """Read transport returning canned responses per function name.

    A response may be a value, an exception instance (raised), or a
    callable taking the call args (its return value is used).
    """

    def __init__(self, responses: Optional[Dict[str, Any]] = None, delay: float = 0.0):
        self.responses = responses or {}
        self.delay = delay
        self.calls: List[tuple] = []

    async def read_contract(
        self, address: str, abi: list, function_name: str, args: Sequence[Any]
    ) -> Any:
        self.calls.append((address, function_name, list(args)))
        if self.delay:
            await asyncio.sleep(self.delay)
        response = self.responses.get(function_name)
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(list(args))
        return response

    def calls_to(self, function_name: str) -> List[tuple]:
        return [c for c in self.calls if c[1] == function_name]


class StubSigner:
    """Signing transport that records submissions and returns fixed hashes."""

    def __init__(
        self,
        tx_hash: str = TX_HASH,
        error: Optional[Exception] = None,
        delay: float = 0.0,
        on_submit=None,
    ):
        self.tx_hash = tx_hash
        self.error = error
        self.delay = delay
        self.on_submit = on_submit
        self.calls: List[dict] = []

    async def write_contract(
        self,
        address: str,
        abi: list,
        function_name: str,
        args: Sequence[Any],
        account: str,
        chain_id: int,
    ) -> str:
        self.calls.append(
            {
                "address": address,
                "function": function_name,
                "args": list(args),
                "account": account,
                "chain_id": chain_id,
            }
        )
        if self.on_submit is not None:
            self.on_submit(self.calls[-1])
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.tx_hash


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def networks():
    """Default table with the local network pointed at CONTRACT."""
    return DEFAULT_NETWORKS.with_overrides(contracts={LOCAL: CONTRACT})


@pytest.fixture
def resolver(networks) -> NetworkResolver:
    return NetworkResolver(networks)


@pytest.fixture
def session() -> StaticSession:
    return StaticSession(account=OWNER)


@pytest.fixture
def store() -> StateStore:
    return StateStore()


@pytest.fixture
def read_transport() -> StubReadTransport:
    return StubReadTransport(
        {
            "getChildren": [(CHILD_A, "admin")],
            "getChildByRole": CHILD_A,
            "getChildrenCount": 1,
            "isChildOf": True,
        }
    )


@pytest.fixture
def signer() -> StubSigner:
    return StubSigner()


@pytest.fixture
def reader(resolver, session, read_transport, store) -> ContractReader:
    return ContractReader(
        resolver=resolver,
        network_id=LOCAL,
        session=session,
        transport=read_transport,
        store=store,
    )


@pytest.fixture
def writer(resolver, session, reader, store, signer) -> ContractWriter:
    return ContractWriter(
        resolver=resolver,
        network_id=LOCAL,
        session=session,
        reader=reader,
        store=store,
        signer=signer,
    )


@pytest.fixture
def controller(networks, session, read_transport, signer) -> RecordPlatformController:
    return RecordPlatformController(
        config=ControllerConfig(network_id=LOCAL, networks=networks),
        session=session,
        read_transport=read_transport,
        signer=signer,
    )

