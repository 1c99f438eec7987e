"""
Record Contract Platform controller.

Chain-aware client for the RecordContractPlatform child registry: resolves
the deployed contract per network, runs owner-scoped read queries and
submits add/remove transactions followed by a cache refresh.

Quick Start:
    >>> import asyncio
    >>> from record_platform import Network, RecordPlatformController
    >>>
    >>> async def main():
    ...     controller = RecordPlatformController.create(
    ...         network_id=Network.SEPOLIA,
    ...         account="0x1234567890123456789012345678901234567890",
    ...     )
    ...     children = await controller.fetch_children()
    ...     print(children)
    ...
    >>> asyncio.run(main())
"""

from .abi import RECORD_CONTRACT_PLATFORM_ABI
from .config import (
    DEFAULT_NETWORKS,
    ControllerConfig,
    Network,
    NetworkConfig,
    NetworkTable,
    load_network_table,
)
from .controller import RecordPlatformController
from .errors import (
    ConfigurationError,
    ContractNotConfiguredError,
    IdentityError,
    MissingOwnerError,
    OperationTimeoutError,
    ReadError,
    ReadTimeoutError,
    RecordPlatformError,
    SubmissionError,
    ValidationError,
    WalletConnectionError,
)
from .models import ChildRecord, ReadResult
from .reader import ContractReader
from .resolver import UNSET, NetworkResolver, TransportConfig
from .session import Session, StaticSession, resolve_owner
from .state import StateStore
from .transport import ReadTransport, SigningTransport, Web3ReadTransport, Web3SigningTransport
from .version import __version__
from .writer import ContractWriter

__all__ = [
    "__version__",
    # Controller
    "RecordPlatformController",
    "ContractReader",
    "ContractWriter",
    "StateStore",
    # Config
    "Network",
    "NetworkConfig",
    "NetworkTable",
    "DEFAULT_NETWORKS",
    "ControllerConfig",
    "load_network_table",
    "NetworkResolver",
    "TransportConfig",
    "UNSET",
    # Models
    "ChildRecord",
    "ReadResult",
    # Session / transports
    "Session",
    "StaticSession",
    "resolve_owner",
    "ReadTransport",
    "SigningTransport",
    "Web3ReadTransport",
    "Web3SigningTransport",
    "RECORD_CONTRACT_PLATFORM_ABI",
    # Errors
    "RecordPlatformError",
    "ConfigurationError",
    "WalletConnectionError",
    "IdentityError",
    "ValidationError",
    "SubmissionError",
    "OperationTimeoutError",
    "ReadError",
    "ContractNotConfiguredError",
    "MissingOwnerError",
    "ReadTimeoutError",
]
