from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_NETWORKS, NetworkConfig, NetworkTable, public_rpc_url
from .constants import ZERO_ADDRESS

__all__ = ["UNSET", "TransportConfig", "NetworkResolver", "is_unset"]

# Unset-contract sentinel.
UNSET = ZERO_ADDRESS


def is_unset(address: Optional[str]) -> bool:
    return not address or address.lower() == UNSET


@dataclass(frozen=True)
class TransportConfig:
    network_id: int
    rpc_url: str
    is_local: bool = False


class NetworkResolver:
    """Total, side-effect free lookup of per-network deployment data.

    Every network id resolves: unknown ids get the UNSET contract and the
    public endpoint family, so callers branch on the returned value instead
    of catching errors.
    """

    def __init__(self, networks: NetworkTable = DEFAULT_NETWORKS) -> None:
        self._networks = networks

    @property
    def networks(self) -> NetworkTable:
        return self._networks

    def resolve(self, network_id: int) -> NetworkConfig:
        config = self._networks.get(network_id)
        if config is not None:
            return config
        return NetworkConfig(
            network_id=network_id,
            name=f"chain-{network_id}",
            contract_address=UNSET,
            rpc_url=public_rpc_url(network_id),
        )

    def resolve_contract(self, network_id: int) -> str:
        address = self.resolve(network_id).contract_address
        return UNSET if is_unset(address) else address

    def resolve_transport(self, network_id: int) -> TransportConfig:
        config = self.resolve(network_id)
        return TransportConfig(
            network_id=network_id,
            rpc_url=config.rpc_url,
            is_local=config.is_local,
        )

    def is_configured(self, network_id: int) -> bool:
        return not is_unset(self.resolve_contract(network_id))
