"""RecordContractPlatform controller.

This module provides RecordPlatformController, the facade a UI layer talks
to. It binds one network id to a resolver, a read transport, an optional
signing transport and a session, and exposes the child-registry queries and
mutations together with the observable state.

Example:
    >>> from record_platform import RecordPlatformController, Network
    >>> controller = RecordPlatformController.create(
    ...     network_id=Network.SEPOLIA,
    ...     private_key="0x...",
    ... )
    >>> tx_hash = await controller.add_child("0x...", "admin")
    >>> controller.children
    (ChildRecord(account='0x...', role='admin'),)
"""
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from .abi import RECORD_CONTRACT_PLATFORM_ABI
from .config import ControllerConfig, NetworkConfig
from .errors import ValidationError
from .models import ChildRecord
from .resolver import NetworkResolver
from .session import Session, StaticSession
from .state import StateStore
from .transport import ReadTransport, SigningTransport, Web3ReadTransport, Web3SigningTransport
from .reader import ContractReader
from .writer import ContractWriter
from .utils.deadline import DEFAULT, Timeout
from .utils.logging import get_logger

_logger = get_logger(__name__)


class RecordPlatformController:
    """Child-registry controller bound to a single network."""

    def __init__(
        self,
        config: ControllerConfig,
        session: Session,
        read_transport: ReadTransport,
        signer: Optional[SigningTransport] = None,
        abi: Optional[List[Dict[str, Any]]] = None,
    ):
        self.config = config
        self.session = session
        self.resolver = NetworkResolver(config.networks)
        self.store = StateStore()
        abi = abi or RECORD_CONTRACT_PLATFORM_ABI
        self.reader = ContractReader(
            resolver=self.resolver,
            network_id=config.network_id,
            session=session,
            transport=read_transport,
            store=self.store,
            abi=abi,
            timeout=config.timeout,
        )
        self.writer = ContractWriter(
            resolver=self.resolver,
            network_id=config.network_id,
            session=session,
            reader=self.reader,
            store=self.store,
            signer=signer,
            abi=abi,
            timeout=config.timeout,
        )

    @classmethod
    def create(
        cls,
        network_id: int,
        account: Optional[str] = None,
        private_key: Optional[str] = None,
        rpc_url: Optional[str] = None,
        config: Optional[ControllerConfig] = None,
    ) -> "RecordPlatformController":
        """Build a controller with web3.py transports.

        Args:
            network_id: Chain id to operate on
            account: Session account; derived from ``private_key`` when omitted
            private_key: Optional signing key; without it the controller is read-only
            rpc_url: Endpoint override (default: resolved from the network table)
            config: Optional base configuration (timeout, network table)

        Returns:
            Configured controller
        """
        if config is None:
            config = ControllerConfig(network_id=network_id)
        else:
            config = replace(config, network_id=network_id)
        endpoint = rpc_url or NetworkResolver(config.networks).resolve_transport(network_id).rpc_url

        signer: Optional[SigningTransport] = None
        if private_key:
            signer = Web3SigningTransport(endpoint, private_key)
            if account is None:
                account = signer.address
            elif account.lower() != signer.address.lower():
                raise ValidationError("account does not match the signing key")

        _logger.debug(
            "Creating controller",
            extra={"network_id": network_id, "rpc_url": endpoint, "read_only": signer is None},
        )
        return cls(
            config=config,
            session=StaticSession(account=account),
            read_transport=Web3ReadTransport(endpoint),
            signer=signer,
        )

    # ------------------------------------------------------------------
    # Network / wallet
    # ------------------------------------------------------------------
    @property
    def network(self) -> NetworkConfig:
        return self.resolver.resolve(self.config.network_id)

    @property
    def contract_address(self) -> str:
        return self.resolver.resolve_contract(self.config.network_id)

    @property
    def signer(self) -> Optional[SigningTransport]:
        return self.writer.signer

    def attach_signer(self, signer: SigningTransport) -> None:
        self.writer.signer = signer

    def detach_signer(self) -> None:
        self.writer.signer = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def pending(self) -> bool:
        return self.store.pending

    @property
    def children(self) -> Tuple[ChildRecord, ...]:
        return self.store.children

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    async def add_child(self, account: str, role: str, *, timeout: Timeout = DEFAULT) -> str:
        return await self.writer.add_child(account, role, timeout=timeout)

    async def remove_child(self, account: str, *, timeout: Timeout = DEFAULT) -> str:
        return await self.writer.remove_child(account, timeout=timeout)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    async def fetch_children(
        self, owner: Optional[str] = None, *, timeout: Timeout = DEFAULT
    ) -> List[ChildRecord]:
        return await self.reader.fetch_list(owner, timeout=timeout)

    async def get_child_by_role(
        self, role: str, owner: Optional[str] = None, *, timeout: Timeout = DEFAULT
    ) -> Optional[str]:
        return await self.reader.lookup_by_role(role, owner, timeout=timeout)

    async def get_children_count(
        self, owner: Optional[str] = None, *, timeout: Timeout = DEFAULT
    ) -> int:
        return await self.reader.count(owner, timeout=timeout)

    async def is_child_of(
        self, child: str, owner: Optional[str] = None, *, timeout: Timeout = DEFAULT
    ) -> bool:
        return await self.reader.is_member(child, owner, timeout=timeout)
