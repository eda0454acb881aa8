from __future__ import annotations

from ._base import freeze_abi

_U32 = {"name": "", "internalType": "uint32", "type": "uint32"}

proposal_abi = freeze_abi(
    [
        {
            "type": "constructor",
            "inputs": [
                {"name": "proposer", "internalType": "address", "type": "address"},
                {"name": "title", "internalType": "string", "type": "string"},
                {"name": "start", "internalType": "uint48", "type": "uint48"},
                {"name": "duration", "internalType": "uint32", "type": "uint32"},
            ],
            "stateMutability": "nonpayable",
        },
        {"type": "function", "name": "abstainVotes", "inputs": [], "outputs": [_U32], "stateMutability": "view"},
        {"type": "function", "name": "acceptVotes", "inputs": [], "outputs": [_U32], "stateMutability": "view"},
        {"type": "function", "name": "cancel", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
        {
            "type": "function",
            "name": "details",
            "inputs": [],
            "outputs": [
                {"name": "canceled", "internalType": "bool", "type": "bool"},
                {"name": "duration", "internalType": "uint32", "type": "uint32"},
                {"name": "executed", "internalType": "bool", "type": "bool"},
                {"name": "proposer", "internalType": "address", "type": "address"},
                {"name": "start", "internalType": "uint48", "type": "uint48"},
                {"name": "title", "internalType": "string", "type": "string"},
            ],
            "stateMutability": "view",
        },
        {"type": "function", "name": "execute", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
        {
            "type": "function",
            "name": "hasVoted",
            "inputs": [
                {"name": "token", "internalType": "address", "type": "address"},
                {"name": "tokenID", "internalType": "uint256", "type": "uint256"},
            ],
            "outputs": [
                {
                    "name": "",
                    "internalType": "struct Proposal.Vote",
                    "type": "tuple",
                    "components": [
                        {"name": "vote", "internalType": "uint8", "type": "uint8"},
                        {"name": "voted", "internalType": "bool", "type": "bool"},
                    ],
                }
            ],
            "stateMutability": "view",
        },
        {
            "type": "function",
            "name": "owner",
            "inputs": [],
            "outputs": [{"name": "", "internalType": "address", "type": "address"}],
            "stateMutability": "view",
        },
        {"type": "function", "name": "rejectVotes", "inputs": [], "outputs": [_U32], "stateMutability": "view"},
        {"type": "function", "name": "renounceOwnership", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
        {
            "type": "function",
            "name": "transferOwnership",
            "inputs": [{"name": "newOwner", "internalType": "address", "type": "address"}],
            "outputs": [],
            "stateMutability": "nonpayable",
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
                {"name": "token", "internalType": "address", "type": "address"},
                {"name": "tokenID", "internalType": "uint256", "type": "uint256"},
                {"name": "choice", "internalType": "uint8", "type": "uint8"},
            ],
            "outputs": [],
            "stateMutability": "nonpayable",
        },
        {"type": "function", "name": "voteResults", "inputs": [], "outputs": [_U32, _U32, _U32], "stateMutability": "view"},
        {
            "type": "event",
            "name": "OwnershipTransferred",
            "anonymous": False,
            "inputs": [
                {"name": "previousOwner", "internalType": "address", "type": "address", "indexed": True},
                {"name": "newOwner", "internalType": "address", "type": "address", "indexed": True},
            ],
        },
        {"type": "event", "name": "ProposalCanceled", "anonymous": False, "inputs": []},
        {"type": "event", "name": "ProposalExecuted", "anonymous": False, "inputs": []},
        {
            "type": "event",
            "name": "Voted",
            "anonymous": False,
            "inputs": [
                {"name": "token", "internalType": "address", "type": "address", "indexed": False},
                {"name": "tokenID", "internalType": "uint256", "type": "uint256", "indexed": False},
            ],
        },
        {
            "type": "error",
            "name": "OwnableInvalidOwner",
            "inputs": [{"name": "owner", "internalType": "address", "type": "address"}],
        },
        {
            "type": "error",
            "name": "OwnableUnauthorizedAccount",
            "inputs": [{"name": "account", "internalType": "address", "type": "address"}],
        },
    ]
)

__all__ = ["proposal_abi"]
