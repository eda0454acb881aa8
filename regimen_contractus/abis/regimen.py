from __future__ import annotations

from ._base import freeze_abi

_TOKEN = {"name": "token", "internalType": "address", "type": "address"}

regimen_abi = freeze_abi(
    [
        {"type": "constructor", "inputs": [], "stateMutability": "nonpayable"},
        {"type": "function", "name": "addToken", "inputs": [_TOKEN], "outputs": [], "stateMutability": "nonpayable"},
        {
            "type": "function",
            "name": "canVote",
            "inputs": [_TOKEN],
            "outputs": [{"name": "", "internalType": "bool", "type": "bool"}],
            "stateMutability": "view",
        },
        {"type": "function", "name": "removeToken", "inputs": [_TOKEN], "outputs": [], "stateMutability": "nonpayable"},
        {
            "type": "function",
            "name": "owner",
            "inputs": [],
            "outputs": [{"name": "", "internalType": "address", "type": "address"}],
            "stateMutability": "view",
        },
        {
            "type": "function",
            "name": "version",
            "inputs": [],
            "outputs": [{"name": "", "internalType": "string", "type": "string"}],
            "stateMutability": "pure",
        },
        {
            "type": "event",
            "name": "TokenAdded",
            "anonymous": False,
            "inputs": [{**_TOKEN, "indexed": True}],
        },
        {
            "type": "event",
            "name": "TokenRemoved",
            "anonymous": False,
            "inputs": [{**_TOKEN, "indexed": True}],
        },
        {
            "type": "error",
            "name": "OwnableUnauthorizedAccount",
            "inputs": [{"name": "account", "internalType": "address", "type": "address"}],
        },
    ]
)

__all__ = ["regimen_abi"]
