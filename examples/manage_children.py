#!/usr/bin/env python3
"""
Manage Children Example

Lists the children registered under an owner and optionally registers a
new one.

Environment Variables:
    NETWORK_ID: Chain id (default: 11155111, Sepolia)
    OWNER_ADDRESS: Owner to query (default: derived from PRIVATE_KEY)
    PRIVATE_KEY: Signing key; required only to add a child
    CHILD_ADDRESS / CHILD_ROLE: Child to register (skipped when unset)
    RECORD_PLATFORM_CONTRACT_<CHAIN_ID>: Contract address override

Run with: python examples/manage_children.py
"""

import asyncio
import os

from dotenv import load_dotenv

from record_platform import ControllerConfig, RecordPlatformController, load_network_table
from record_platform.utils import configure_logging

# Load .env file
load_dotenv()

NETWORK_ID = int(os.getenv("NETWORK_ID", "11155111"))
OWNER_ADDRESS = os.getenv("OWNER_ADDRESS") or None
PRIVATE_KEY = os.getenv("PRIVATE_KEY") or None
CHILD_ADDRESS = os.getenv("CHILD_ADDRESS") or None
CHILD_ROLE = os.getenv("CHILD_ROLE", "admin")


async def main() -> None:
    configure_logging("DEBUG")

    controller = RecordPlatformController.create(
        network_id=NETWORK_ID,
        account=OWNER_ADDRESS,
        private_key=PRIVATE_KEY,
        config=ControllerConfig(network_id=NETWORK_ID, networks=load_network_table()),
    )

    print("=" * 60)
    print(f"Network:  {controller.network.name} ({NETWORK_ID})")
    print(f"Contract: {controller.contract_address}")
    print(f"Owner:    {controller.session.account}")
    print("=" * 60)

    if CHILD_ADDRESS:
        tx_hash = await controller.add_child(CHILD_ADDRESS, CHILD_ROLE)
        print(f"addChild submitted: {tx_hash}")

    children = await controller.fetch_children()
    count = await controller.get_children_count()
    print(f"{count} child(ren):")
    for child in children:
        print(f"  {child.account}  {child.role}")


if __name__ == "__main__":
    asyncio.run(main())
