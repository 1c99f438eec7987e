"""
Write side of the RecordContractPlatform controller.

add_child/remove_child check their preconditions in a fixed order
(contract configured, wallet attached, account known, input valid) and
raise before any network traffic when one fails. A successful submission
is followed by exactly one refresh of the reader's children cache, which
completes before the transaction hash is returned.

Writes for the same owner run one at a time, so refreshes land in
submission order. The pending flag is raised before a write queues for its
owner lock and cleared on every exit path.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Sequence

from web3 import Web3

from .abi import FN_ADD_CHILD, FN_REMOVE_CHILD, RECORD_CONTRACT_PLATFORM_ABI
from .constants import DEFAULT_TIMEOUT_SECONDS
from .errors import (
    ConfigurationError,
    IdentityError,
    OperationTimeoutError,
    SubmissionError,
    ValidationError,
    WalletConnectionError,
)
from .reader import ContractReader
from .resolver import NetworkResolver, is_unset
from .session import Session, resolve_owner
from .state import StateStore
from .transport import SigningTransport
from .utils.deadline import DEFAULT, DeadlineExceeded, Timeout, pick_timeout, with_deadline
from .utils.logging import get_logger

__all__ = ["ContractWriter"]

_logger = get_logger(__name__)


class _OwnerLock:
    """Write lock for one owner plus the number of writes holding or awaiting it."""

    def __init__(self) -> None:
        self.lock = asyncio.Lock()
        self.users = 0


def _validate_address(address: str, field: str = "address") -> None:
    """Validate Ethereum address format.

    Raises:
        ValidationError: If address format is invalid
    """
    if not isinstance(address, str) or not Web3.is_address(address):
        raise ValidationError(f"{field} must be a valid Ethereum address", details={field: address})


class ContractWriter:
    """Mutating calls against the RecordContractPlatform contract.

    Args:
        resolver: Network resolver
        network_id: Active network id (also the chain id transactions target)
        session: Identity provider supplying the sending account
        reader: Reader refreshed after every successful submission
        store: State store whose pending flag brackets each write
        signer: Signing transport; None until a wallet is connected
        abi: Contract ABI
        timeout: Default per-call deadline in seconds (None disables)
    """

    def __init__(
        self,
        resolver: NetworkResolver,
        network_id: int,
        session: Session,
        reader: ContractReader,
        store: StateStore,
        signer: Optional[SigningTransport] = None,
        abi: Optional[List[Dict[str, Any]]] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._resolver = resolver
        self._network_id = network_id
        self._session = session
        self._reader = reader
        self._store = store
        self.signer = signer
        self._abi = abi or RECORD_CONTRACT_PLATFORM_ABI
        self._timeout = timeout
        self._locks: Dict[str, _OwnerLock] = {}

    async def add_child(
        self, account: str, role: str, *, timeout: Timeout = DEFAULT
    ) -> str:
        """Register ``account`` under the session account with ``role``.

        Args:
            account: Child EOA address
            role: Role label

        Returns:
            Transaction hash

        Raises:
            ConfigurationError: No contract on the active network
            WalletConnectionError: No signing transport attached
            IdentityError: No authenticated account
            ValidationError: ``account`` is not an address
            SubmissionError: The signing transport failed
            OperationTimeoutError: Submission did not finish before the deadline
        """
        contract, signer, sender = self._preconditions()
        _validate_address(account, "account")
        return await self._submit(contract, signer, sender, FN_ADD_CHILD, [account, role], timeout)

    async def remove_child(self, account: str, *, timeout: Timeout = DEFAULT) -> str:
        """Remove ``account`` from the session account's children.

        Raises the same errors as add_child.
        """
        contract, signer, sender = self._preconditions()
        _validate_address(account, "account")
        return await self._submit(contract, signer, sender, FN_REMOVE_CHILD, [account], timeout)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _preconditions(self) -> "tuple[str, SigningTransport, str]":
        contract = self._resolver.resolve_contract(self._network_id)
        if is_unset(contract):
            raise ConfigurationError(
                "RecordContractPlatform address not configured",
                details={"network_id": self._network_id},
            )
        if self.signer is None:
            raise WalletConnectionError("Wallet not connected")
        sender = resolve_owner(None, self._session.account)
        if sender is None:
            raise IdentityError("User address not set")
        return contract, self.signer, sender

    @asynccontextmanager
    async def _serialized(self, owner: str) -> AsyncIterator[None]:
        """Hold the owner's write lock; the lock is dropped once nobody uses it."""
        key = owner.lower()
        slot = self._locks.get(key)
        if slot is None:
            slot = self._locks[key] = _OwnerLock()
        slot.users += 1
        try:
            async with slot.lock:
                yield
        finally:
            slot.users -= 1
            if slot.users == 0:
                del self._locks[key]

    async def _submit(
        self,
        contract: str,
        signer: SigningTransport,
        sender: str,
        function_name: str,
        args: Sequence[Any],
        timeout: Timeout,
    ) -> str:
        deadline = pick_timeout(timeout, self._timeout)
        # pending covers the wait for the lock too
        self._store.begin_operation()
        try:
            async with self._serialized(sender):
                _logger.info(
                    "Submitting contract call",
                    extra={
                        "function": function_name,
                        "account": sender,
                        "network_id": self._network_id,
                    },
                )
                try:
                    tx_hash = await with_deadline(
                        signer.write_contract(
                            contract,
                            self._abi,
                            function_name,
                            args,
                            account=sender,
                            chain_id=self._network_id,
                        ),
                        deadline,
                    )
                except SubmissionError:
                    raise
                except DeadlineExceeded:
                    raise OperationTimeoutError(
                        f"{function_name} was not submitted within {deadline}s",
                        details={"function": function_name, "account": sender},
                    ) from None
                except Exception as e:
                    raise SubmissionError(
                        str(e) or e.__class__.__name__,
                        details={"function": function_name, "account": sender},
                    ) from e

                _logger.info(
                    "Contract call submitted",
                    extra={"function": function_name, "tx_hash": tx_hash},
                )
                # Never raises; failures degrade inside the reader.
                await self._reader.fetch_list(owner=sender, timeout=timeout)
                return tx_hash
        finally:
            self._store.end_operation()
