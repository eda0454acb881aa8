from __future__ import annotations

from ._base import freeze_abi

arbiter_abi = freeze_abi(
    [
        {"type": "constructor", "inputs": [], "stateMutability": "nonpayable"},
        {
            "type": "function",
            "name": "CUSTODIAN_ROLE",
            "inputs": [],
            "outputs": [{"name": "", "internalType": "bytes32", "type": "bytes32"}],
            "stateMutability": "view",
        },
        {
            "type": "function",
            "name": "DEFAULT_ADMIN_ROLE",
            "inputs": [],
            "outputs": [{"name": "", "internalType": "bytes32", "type": "bytes32"}],
            "stateMutability": "view",
        },
        {
            "type": "function",
            "name": "EXECUTOR_ROLE",
            "inputs": [],
            "outputs": [{"name": "", "internalType": "bytes32", "type": "bytes32"}],
            "stateMutability": "view",
        },
        {
            "type": "function",
            "name": "addToken",
            "inputs": [{"name": "token", "internalType": "address", "type": "address"}],
            "outputs": [],
            "stateMutability": "nonpayable",
        },
        {
            "type": "function",
            "name": "cancel",
            "inputs": [{"name": "proposal", "internalType": "address", "type": "address"}],
            "outputs": [],
            "stateMutability": "nonpayable",
        },
        {
            "type": "function",
            "name": "eligibility",
            "inputs": [{"name": "token", "internalType": "address", "type": "address"}],
            "outputs": [{"name": "", "internalType": "bool", "type": "bool"}],
            "stateMutability": "view",
        },
        {
            "type": "function",
            "name": "execute",
            "inputs": [{"name": "proposal", "internalType": "address", "type": "address"}],
            "outputs": [],
            "stateMutability": "nonpayable",
        },
        {
            "type": "function",
            "name": "getRoleAdmin",
            "inputs": [{"name": "role", "internalType": "bytes32", "type": "bytes32"}],
            "outputs": [{"name": "", "internalType": "bytes32", "type": "bytes32"}],
            "stateMutability": "view",
        },
        {
            "type": "function",
            "name": "grantRole",
            "inputs": [
                {"name": "role", "internalType": "bytes32", "type": "bytes32"},
                {"name": "account", "internalType": "address", "type": "address"},
            ],
            "outputs": [],
            "stateMutability": "nonpayable",
        },
        {
            "type": "function",
            "name": "hasRole",
            "inputs": [
                {"name": "role", "internalType": "bytes32", "type": "bytes32"},
                {"name": "account", "internalType": "address", "type": "address"},
            ],
            "outputs": [{"name": "", "internalType": "bool", "type": "bool"}],
            "stateMutability": "view",
        },
        {
            "type": "function",
            "name": "hasVoted",
            "inputs": [
                {"name": "tokenID", "internalType": "uint256", "type": "uint256"},
                {"name": "proposal", "internalType": "address", "type": "address"},
            ],
            "outputs": [
                {"name": "", "internalType": "uint8", "type": "uint8"},
                {"name": "", "internalType": "bool", "type": "bool"},
            ],
            "stateMutability": "view",
        },
        {
            "type": "function",
            "name": "propose",
            "inputs": [
                {"name": "proposer", "internalType": "address", "type": "address"},
                {"name": "title", "internalType": "string", "type": "string"},
                {"name": "start", "internalType": "uint48", "type": "uint48"},
                {"name": "duration", "internalType": "uint32", "type": "uint32"},
            ],
            "outputs": [{"name": "", "internalType": "address", "type": "address"}],
            "stateMutability": "nonpayable",
        },
        {
            "type": "function",
            "name": "removeToken",
            "inputs": [{"name": "token", "internalType": "address", "type": "address"}],
            "outputs": [],
            "stateMutability": "nonpayable",
        },
        {
            "type": "function",
            "name": "renounceRole",
            "inputs": [
                {"name": "role", "internalType": "bytes32", "type": "bytes32"},
                {"name": "callerConfirmation", "internalType": "address", "type": "address"},
            ],
            "outputs": [],
            "stateMutability": "nonpayable",
        },
        {
            "type": "function",
            "name": "revokeRole",
            "inputs": [
                {"name": "role", "internalType": "bytes32", "type": "bytes32"},
                {"name": "account", "internalType": "address", "type": "address"},
            ],
            "outputs": [],
            "stateMutability": "nonpayable",
        },
        {
            "type": "function",
            "name": "supportsInterface",
            "inputs": [{"name": "interfaceId", "internalType": "bytes4", "type": "bytes4"}],
            "outputs": [{"name": "", "internalType": "bool", "type": "bool"}],
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
            "type": "function",
            "name": "vote",
            "inputs": [
                {"name": "tokenID", "internalType": "uint256", "type": "uint256"},
                {"name": "proposal", "internalType": "address", "type": "address"},
                {"name": "choice", "internalType": "uint8", "type": "uint8"},
            ],
            "outputs": [],
            "stateMutability": "nonpayable",
        },
        {
            "type": "event",
            "name": "Debug",
            "anonymous": False,
            "inputs": [{"name": "", "internalType": "string", "type": "string", "indexed": False}],
        },
        {
            "type": "event",
            "name": "ProposalCreated",
            "anonymous": False,
            "inputs": [
                {"name": "contractAddress", "internalType": "address", "type": "address", "indexed": False},
                {"name": "proposer", "internalType": "address", "type": "address", "indexed": False},
                {"name": "start", "internalType": "uint48", "type": "uint48", "indexed": False},
                {"name": "duration", "internalType": "uint32", "type": "uint32", "indexed": False},
            ],
        },
        {
            "type": "event",
            "name": "RoleAdminChanged",
            "anonymous": False,
            "inputs": [
                {"name": "role", "internalType": "bytes32", "type": "bytes32", "indexed": True},
                {"name": "previousAdminRole", "internalType": "bytes32", "type": "bytes32", "indexed": True},
                {"name": "newAdminRole", "internalType": "bytes32", "type": "bytes32", "indexed": True},
            ],
        },
        {
            "type": "event",
            "name": "RoleGranted",
            "anonymous": False,
            "inputs": [
                {"name": "role", "internalType": "bytes32", "type": "bytes32", "indexed": True},
                {"name": "account", "internalType": "address", "type": "address", "indexed": True},
                {"name": "sender", "internalType": "address", "type": "address", "indexed": True},
            ],
        },
        {
            "type": "event",
            "name": "RoleRevoked",
            "anonymous": False,
            "inputs": [
                {"name": "role", "internalType": "bytes32", "type": "bytes32", "indexed": True},
                {"name": "account", "internalType": "address", "type": "address", "indexed": True},
                {"name": "sender", "internalType": "address", "type": "address", "indexed": True},
            ],
        },
        {
            "type": "event",
            "name": "TokenAdded",
            "anonymous": False,
            "inputs": [{"name": "token", "internalType": "address", "type": "address", "indexed": True}],
        },
        {
            "type": "event",
            "name": "TokenRemoved",
            "anonymous": False,
            "inputs": [{"name": "token", "internalType": "address", "type": "address", "indexed": True}],
        },
        {"type": "error", "name": "AccessControlBadConfirmation", "inputs": []},
        {
            "type": "error",
            "name": "AccessControlUnauthorizedAccount",
            "inputs": [
                {"name": "account", "internalType": "address", "type": "address"},
                {"name": "neededRole", "internalType": "bytes32", "type": "bytes32"},
            ],
        },
    ]
)

__all__ = ["arbiter_abi"]
