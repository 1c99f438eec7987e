"""
Transports used by the reader and writer.

ReadTransport and SigningTransport are the narrow interfaces the controller
consumes; anything implementing them (a wallet bridge, a test stub) can be
plugged in. Web3ReadTransport and Web3SigningTransport are the default
web3.py-backed implementations.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, Sequence, runtime_checkable

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3, Web3

from .constants import DEFAULT_GAS_LIMIT, DEFAULT_TIMEOUT_SECONDS, MAX_FEE_MULTIPLIER, PRIORITY_FEE_GWEI
from .errors import SubmissionError, ValidationError
from .utils.logging import get_logger

__all__ = [
    "ReadTransport",
    "SigningTransport",
    "Web3ReadTransport",
    "Web3SigningTransport",
]

_logger = get_logger(__name__)


@runtime_checkable
class ReadTransport(Protocol):
    """Executes read-only contract calls and returns the decoded result."""

    async def read_contract(
        self,
        address: str,
        abi: List[Dict[str, Any]],
        function_name: str,
        args: Sequence[Any],
    ) -> Any: ...


@runtime_checkable
class SigningTransport(Protocol):
    """Submits mutating contract calls and returns the transaction hash."""

    async def write_contract(
        self,
        address: str,
        abi: List[Dict[str, Any]],
        function_name: str,
        args: Sequence[Any],
        account: str,
        chain_id: int,
    ) -> str: ...


def _find_function(abi: List[Dict[str, Any]], function_name: str) -> Dict[str, Any]:
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == function_name:
            return entry
    raise ValueError(f"Function {function_name} not found in ABI")


def _checksum_args(
    abi: List[Dict[str, Any]], function_name: str, args: Sequence[Any]
) -> List[Any]:
    """Checksum every argument declared as ``address``; web3.py rejects the rest."""
    inputs = _find_function(abi, function_name).get("inputs", [])
    normalized = list(args)
    for index, spec in enumerate(inputs[: len(normalized)]):
        if spec.get("type") == "address" and isinstance(normalized[index], str):
            normalized[index] = Web3.to_checksum_address(normalized[index])
    return normalized


class Web3ReadTransport:
    """Read-only transport backed by ``AsyncWeb3`` over HTTP.

    Args:
        rpc_url: JSON-RPC endpoint
        w3: Optional pre-built AsyncWeb3 instance (tests, custom providers)
        timeout: HTTP request timeout in seconds
    """

    def __init__(
        self,
        rpc_url: str,
        w3: Optional[AsyncWeb3] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.rpc_url = rpc_url
        self.w3 = w3 or AsyncWeb3(
            AsyncWeb3.AsyncHTTPProvider(rpc_url, request_kwargs={"timeout": timeout})
        )

    async def read_contract(
        self,
        address: str,
        abi: List[Dict[str, Any]],
        function_name: str,
        args: Sequence[Any],
    ) -> Any:
        contract = self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)
        func = getattr(contract.functions, function_name)
        return await func(*_checksum_args(abi, function_name, args)).call()


class Web3SigningTransport:
    """Signing transport that signs locally with an eth-account key.

    The transaction is sent raw; no receipt is awaited.

    Args:
        rpc_url: JSON-RPC endpoint used for nonce/fee lookup and submission
        private_key: 0x-prefixed hex private key
        w3: Optional pre-built AsyncWeb3 instance
        gas_limit: Fixed gas limit for every submission
    """

    def __init__(
        self,
        rpc_url: str,
        private_key: str,
        w3: Optional[AsyncWeb3] = None,
        gas_limit: int = DEFAULT_GAS_LIMIT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.w3 = w3 or AsyncWeb3(
            AsyncWeb3.AsyncHTTPProvider(rpc_url, request_kwargs={"timeout": timeout})
        )
        # Sanitize private key errors to prevent key leakage in stack traces
        try:
            self.account: LocalAccount = Account.from_key(private_key)
        except Exception:
            raise ValidationError("Invalid private key format (key not shown for security)") from None
        self.gas_limit = gas_limit

    @property
    def address(self) -> str:
        return self.account.address

    async def _tx_meta(self, chain_id: int) -> Dict[str, Any]:
        nonce = await self.w3.eth.get_transaction_count(self.account.address, "pending")
        latest_block = await self.w3.eth.get_block("latest")
        base_fee = latest_block.get("baseFeePerGas", 0)
        max_priority_fee = Web3.to_wei(PRIORITY_FEE_GWEI, "gwei")
        return {
            "from": self.account.address,
            "nonce": nonce,
            "chainId": chain_id,
            "gas": self.gas_limit,
            "maxFeePerGas": base_fee * MAX_FEE_MULTIPLIER + max_priority_fee,
            "maxPriorityFeePerGas": max_priority_fee,
        }

    async def write_contract(
        self,
        address: str,
        abi: List[Dict[str, Any]],
        function_name: str,
        args: Sequence[Any],
        account: str,
        chain_id: int,
    ) -> str:
        if account.lower() != self.account.address.lower():
            raise SubmissionError(
                "Signing key does not belong to the requested account",
                details={"account": account, "signer": self.account.address},
            )
        try:
            contract = self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)
            func = getattr(contract.functions, function_name)(
                *_checksum_args(abi, function_name, args)
            )
            tx = await func.build_transaction(await self._tx_meta(chain_id))
            signed = self.account.sign_transaction(tx)
            raw = getattr(signed, "raw_transaction", None) or signed.rawTransaction
            tx_hash = Web3.to_hex(await self.w3.eth.send_raw_transaction(raw))
        except Exception as e:
            raise SubmissionError(
                str(e) or e.__class__.__name__,
                details={"function": function_name, "chain_id": chain_id},
            ) from e

        _logger.debug(
            "Raw transaction sent",
            extra={"function": function_name, "tx_hash": tx_hash, "chain_id": chain_id},
        )
        return tx_hash
