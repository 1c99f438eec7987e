"""
RecordContractPlatform contract ABI (minimal: child registry entry points).
"""

from __future__ import annotations

from typing import Any, Dict, List

__all__ = [
    "RECORD_CONTRACT_PLATFORM_ABI",
    "FN_ADD_CHILD",
    "FN_REMOVE_CHILD",
    "FN_GET_CHILDREN",
    "FN_GET_CHILD_BY_ROLE",
    "FN_GET_CHILDREN_COUNT",
    "FN_IS_CHILD_OF",
]

FN_ADD_CHILD = "addChild"
FN_REMOVE_CHILD = "removeChild"
FN_GET_CHILDREN = "getChildren"
FN_GET_CHILD_BY_ROLE = "getChildByRole"
FN_GET_CHILDREN_COUNT = "getChildrenCount"
FN_IS_CHILD_OF = "isChildOf"

RECORD_CONTRACT_PLATFORM_ABI: List[Dict[str, Any]] = [
    {
        "inputs": [
            {"name": "childEOA", "type": "address"},
            {"name": "role", "type": "string"},
        ],
        "name": FN_ADD_CHILD,
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [{"name": "childEOA", "type": "address"}],
        "name": FN_REMOVE_CHILD,
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [{"name": "owner", "type": "address"}],
        "name": FN_GET_CHILDREN,
        "outputs": [
            {
                "components": [
                    {"name": "childEOA", "type": "address"},
                    {"name": "role", "type": "string"},
                ],
                "name": "",
                "type": "tuple[]",
            }
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "role", "type": "string"},
        ],
        "name": FN_GET_CHILD_BY_ROLE,
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"name": "owner", "type": "address"}],
        "name": FN_GET_CHILDREN_COUNT,
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "child", "type": "address"},
        ],
        "name": FN_IS_CHILD_OF,
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function",
    },
]
