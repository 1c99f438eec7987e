import os
from dataclasses import dataclass, field, replace
from enum import IntEnum
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from dotenv import dotenv_values

from .constants import (
    DEFAULT_TIMEOUT_SECONDS,
    ENV_CONTRACT_PREFIX,
    ENV_RPC_PREFIX,
    HARDHAT_CHAIN_ID,
    HARDHAT_CONTRACT_ADDRESS,
    LOCAL_RPC_URL,
    PUBLIC_RPC_URL_TEMPLATE,
    SEPOLIA_CHAIN_ID,
    SEPOLIA_CONTRACT_ADDRESS,
)

__all__ = [
    "Network",
    "NetworkConfig",
    "NetworkTable",
    "DEFAULT_NETWORKS",
    "ControllerConfig",
    "public_rpc_url",
    "load_network_table",
]


class Network(IntEnum):
    SEPOLIA = SEPOLIA_CHAIN_ID
    HARDHAT = HARDHAT_CHAIN_ID


def public_rpc_url(network_id: int) -> str:
    """Default public endpoint for a network id."""
    return PUBLIC_RPC_URL_TEMPLATE.format(network_id=network_id)


@dataclass(frozen=True)
class NetworkConfig:
    network_id: int
    name: str
    contract_address: str
    rpc_url: str
    is_local: bool = False


class NetworkTable(Mapping[int, NetworkConfig]):
    """Read-only network id -> NetworkConfig mapping.

    Tables are never mutated; ``with_overrides`` returns a new table.
    """

    def __init__(self, entries: Mapping[int, NetworkConfig]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, network_id: int) -> NetworkConfig:
        return self._entries[network_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"NetworkTable({dict(self._entries)!r})"

    def with_overrides(
        self,
        contracts: Optional[Mapping[int, str]] = None,
        rpc_urls: Optional[Mapping[int, str]] = None,
    ) -> "NetworkTable":
        entries = dict(self._entries)
        for network_id, address in (contracts or {}).items():
            if network_id in entries:
                entries[network_id] = replace(entries[network_id], contract_address=address)
        for network_id, url in (rpc_urls or {}).items():
            if network_id in entries:
                entries[network_id] = replace(entries[network_id], rpc_url=url)
        return NetworkTable(entries)


DEFAULT_NETWORKS = NetworkTable(
    {
        Network.SEPOLIA: NetworkConfig(
            network_id=SEPOLIA_CHAIN_ID,
            name="sepolia",
            contract_address=SEPOLIA_CONTRACT_ADDRESS,
            rpc_url=public_rpc_url(SEPOLIA_CHAIN_ID),
        ),
        Network.HARDHAT: NetworkConfig(
            network_id=HARDHAT_CHAIN_ID,
            name="hardhat",
            contract_address=HARDHAT_CONTRACT_ADDRESS,  # override via RECORD_PLATFORM_CONTRACT_31337
            rpc_url=LOCAL_RPC_URL,
            is_local=True,
        ),
    }
)


@dataclass
class ControllerConfig:
    network_id: int
    timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS
    networks: NetworkTable = field(default_factory=lambda: DEFAULT_NETWORKS)


def _collect(values: Mapping[str, Optional[str]], prefix: str) -> dict[int, str]:
    collected: dict[int, str] = {}
    for key, value in values.items():
        if not key.startswith(prefix) or not value:
            continue
        suffix = key[len(prefix):]
        if suffix.isdigit():
            collected[int(suffix)] = value.strip()
    return collected


def load_network_table(
    env_file: Optional[Union[str, Path]] = None,
    base: NetworkTable = DEFAULT_NETWORKS,
) -> NetworkTable:
    """Build a network table with addresses/endpoints overridden from the environment.

    Reads ``RECORD_PLATFORM_CONTRACT_<CHAIN_ID>`` and
    ``RECORD_PLATFORM_RPC_<CHAIN_ID>`` from ``env_file`` (if given) and then
    the process environment, which wins. Only networks already present in
    ``base`` are affected.

    Args:
        env_file: Optional path to a .env file
        base: Table to derive from (default: DEFAULT_NETWORKS)

    Returns:
        A new NetworkTable; ``base`` is left untouched
    """
    values: dict[str, Optional[str]] = {}
    if env_file is not None:
        values.update(dotenv_values(env_file))
    values.update(os.environ)
    return base.with_overrides(
        contracts=_collect(values, ENV_CONTRACT_PREFIX),
        rpc_urls=_collect(values, ENV_RPC_PREFIX),
    )
