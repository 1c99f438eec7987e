"""Constants for the Record Contract Platform controller.

This module defines the constant values shared across the package,
including the zero-address sentinel, known network ids, endpoint
templates and timeout defaults.
"""

# Ethereum Constants
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Network Ids
SEPOLIA_CHAIN_ID = 11155111
HARDHAT_CHAIN_ID = 31337

# Endpoint Constants
LOCAL_RPC_URL = "http://127.0.0.1:8545"
PUBLIC_RPC_URL_TEMPLATE = "https://{network_id}.rpc.thirdweb.com"

# Deployments (placeholders until the contract is live everywhere)
SEPOLIA_CONTRACT_ADDRESS = "0xB1Db2211cB3bFAe1fB676104cA21f236F832435D"
HARDHAT_CONTRACT_ADDRESS = ZERO_ADDRESS

# Timing Constants
DEFAULT_TIMEOUT_SECONDS = 30.0

# Gas Constants
DEFAULT_GAS_LIMIT = 300_000
MAX_FEE_MULTIPLIER = 2
PRIORITY_FEE_GWEI = "1"

# Environment overrides
ENV_CONTRACT_PREFIX = "RECORD_PLATFORM_CONTRACT_"
ENV_RPC_PREFIX = "RECORD_PLATFORM_RPC_"

__all__ = [
    "ZERO_ADDRESS",
    "SEPOLIA_CHAIN_ID",
    "HARDHAT_CHAIN_ID",
    "LOCAL_RPC_URL",
    "PUBLIC_RPC_URL_TEMPLATE",
    "SEPOLIA_CONTRACT_ADDRESS",
    "HARDHAT_CONTRACT_ADDRESS",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_GAS_LIMIT",
    "MAX_FEE_MULTIPLIER",
    "PRIORITY_FEE_GWEI",
    "ENV_CONTRACT_PREFIX",
    "ENV_RPC_PREFIX",
]
