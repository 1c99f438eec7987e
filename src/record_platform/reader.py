"""
Read side of the RecordContractPlatform controller.

Every query has two forms:

- ``try_*`` returns a ReadResult that keeps the failure reason.
- the plain form maps any failure to a neutral default (``[]``, ``None``,
  ``0``, ``False``) for callers that only render results. It never raises,
  which also means "empty on-chain" and "query failed" look the same.

Both forms short-circuit without touching the network when the active
network has no contract or no owner can be resolved.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

from .abi import (
    FN_GET_CHILD_BY_ROLE,
    FN_GET_CHILDREN,
    FN_GET_CHILDREN_COUNT,
    FN_IS_CHILD_OF,
    RECORD_CONTRACT_PLATFORM_ABI,
)
from .constants import DEFAULT_TIMEOUT_SECONDS
from .errors import ContractNotConfiguredError, MissingOwnerError, ReadError, ReadTimeoutError
from .models import ChildRecord, ReadResult
from .resolver import NetworkResolver, is_unset
from .session import Session, resolve_owner
from .state import StateStore
from .transport import ReadTransport
from .utils.deadline import DEFAULT, DeadlineExceeded, Timeout, pick_timeout, with_deadline
from .utils.logging import get_logger

__all__ = ["ContractReader"]

_logger = get_logger(__name__)

T = TypeVar("T")


def _decode_children(raw: Any) -> List[ChildRecord]:
    return [ChildRecord.from_raw(item) for item in (raw or [])]


def _decode_address(raw: Any) -> Optional[str]:
    return None if is_unset(raw) else raw


class ContractReader:
    """Read-only queries against the RecordContractPlatform contract.

    Args:
        resolver: Network resolver
        network_id: Active network id
        session: Identity provider; its account is the default owner
        transport: Read-only transport
        store: State store whose children cache ``fetch_list`` replaces
        abi: Contract ABI
        timeout: Default per-call deadline in seconds (None disables)
    """

    def __init__(
        self,
        resolver: NetworkResolver,
        network_id: int,
        session: Session,
        transport: ReadTransport,
        store: StateStore,
        abi: Optional[List[Dict[str, Any]]] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._resolver = resolver
        self._network_id = network_id
        self._session = session
        self._transport = transport
        self._store = store
        self._abi = abi or RECORD_CONTRACT_PLATFORM_ABI
        self._timeout = timeout

    @property
    def contract_address(self) -> str:
        return self._resolver.resolve_contract(self._network_id)

    # ------------------------------------------------------------------
    # Result-typed queries
    # ------------------------------------------------------------------
    async def try_fetch_list(
        self, owner: Optional[str] = None, *, timeout: Timeout = DEFAULT
    ) -> ReadResult[List[ChildRecord]]:
        """Fetch the owner's children and, on success, replace the cache."""
        result, target = await self._query(
            FN_GET_CHILDREN, lambda o: [o], _decode_children, owner, timeout
        )
        if result.ok and target is not None:
            self._store.replace_children(target, result.value or [])
        return result

    async def try_lookup_by_role(
        self, role: str, owner: Optional[str] = None, *, timeout: Timeout = DEFAULT
    ) -> ReadResult[Optional[str]]:
        result, _ = await self._query(
            FN_GET_CHILD_BY_ROLE, lambda o: [o, role], _decode_address, owner, timeout
        )
        return result

    async def try_count(
        self, owner: Optional[str] = None, *, timeout: Timeout = DEFAULT
    ) -> ReadResult[int]:
        # uint256 -> Python int is exact, no overflow to worry about
        result, _ = await self._query(FN_GET_CHILDREN_COUNT, lambda o: [o], int, owner, timeout)
        return result

    async def try_is_member(
        self, candidate: str, owner: Optional[str] = None, *, timeout: Timeout = DEFAULT
    ) -> ReadResult[bool]:
        result, _ = await self._query(
            FN_IS_CHILD_OF, lambda o: [o, candidate], bool, owner, timeout
        )
        return result

    # ------------------------------------------------------------------
    # Degraded-default queries
    # ------------------------------------------------------------------
    async def fetch_list(
        self, owner: Optional[str] = None, *, timeout: Timeout = DEFAULT
    ) -> List[ChildRecord]:
        return (await self.try_fetch_list(owner, timeout=timeout)).unwrap_or([])

    async def lookup_by_role(
        self, role: str, owner: Optional[str] = None, *, timeout: Timeout = DEFAULT
    ) -> Optional[str]:
        return (await self.try_lookup_by_role(role, owner, timeout=timeout)).unwrap_or(None)

    async def count(self, owner: Optional[str] = None, *, timeout: Timeout = DEFAULT) -> int:
        return (await self.try_count(owner, timeout=timeout)).unwrap_or(0)

    async def is_member(
        self, candidate: str, owner: Optional[str] = None, *, timeout: Timeout = DEFAULT
    ) -> bool:
        return (await self.try_is_member(candidate, owner, timeout=timeout)).unwrap_or(False)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    async def _query(
        self,
        function_name: str,
        build_args: Callable[[str], Sequence[Any]],
        decode: Callable[[Any], T],
        owner: Optional[str],
        timeout: Timeout,
    ) -> "tuple[ReadResult[T], Optional[str]]":
        contract = self.contract_address
        if is_unset(contract):
            _logger.warning(
                "RecordContractPlatform address not configured",
                extra={"function": function_name, "network_id": self._network_id},
            )
            return ReadResult.failure(
                ContractNotConfiguredError(
                    "RecordContractPlatform address not configured",
                    details={"network_id": self._network_id},
                )
            ), None

        target = resolve_owner(owner, self._session.account)
        if target is None:
            _logger.warning("No owner address to query", extra={"function": function_name})
            return ReadResult.failure(MissingOwnerError("No owner address to query")), None

        deadline = pick_timeout(timeout, self._timeout)
        try:
            raw = await with_deadline(
                self._transport.read_contract(
                    contract, self._abi, function_name, build_args(target)
                ),
                deadline,
            )
            value = decode(raw)
        except DeadlineExceeded:
            _logger.error(
                "Contract read timed out",
                extra={"function": function_name, "owner": target, "timeout": deadline},
            )
            return ReadResult.failure(
                ReadTimeoutError(
                    f"{function_name} timed out after {deadline}s",
                    details={"function": function_name, "owner": target},
                )
            ), target
        except Exception as e:
            _logger.error(
                "Contract read failed",
                extra={"function": function_name, "owner": target, "error": str(e)},
            )
            error = ReadError(
                f"{function_name} failed: {e}",
                details={"function": function_name, "owner": target},
            )
            error.__cause__ = e
            return ReadResult.failure(error), target

        return ReadResult.success(value), target
