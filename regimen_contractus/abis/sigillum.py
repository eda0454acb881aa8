from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ._base import freeze_abi

_ADDR = "address"


def _p(name: str, typ: str, **extra: Any) -> Dict[str, Any]:
    return {"name": name, "internalType": extra.pop("internal_type", typ), "type": typ, **extra}


def _view(name: str, inputs: Sequence[Dict[str, Any]], outputs: Sequence[Dict[str, Any]], *, pure: bool = False) -> Dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": list(inputs),
        "outputs": list(outputs),
        "stateMutability": "pure" if pure else "view",
    }


def _write(name: str, inputs: Sequence[Dict[str, Any]], outputs: Sequence[Dict[str, Any]] = ()) -> Dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": list(inputs),
        "outputs": list(outputs),
        "stateMutability": "nonpayable",
    }


def token_entries(
    *,
    mint_inputs: Sequence[Dict[str, Any]],
    token_of_outputs: Sequence[Dict[str, Any]],
) -> List[Dict[str, Any]]:
    """
    Entries shared by every Sigillum variant. Variants differ only in the
    `mint` inputs and the shape returned by `tokenOf`.
    """
    return [
        {
            "type": "constructor",
            "inputs": [
                _p("name", "string"),
                _p("symbol", "string"),
                _p("description", "string"),
                _p("arbiter", _ADDR),
            ],
            "stateMutability": "nonpayable",
        },
        _view("arbiter", [], [_p("", _ADDR)]),
        _view("balanceOf", [_p("owner", _ADDR)], [_p("", "uint256")]),
        _write("burn", [_p("id", "uint256")]),
        _view("contractURI", [], [_p("", "string")]),
        _view("description", [], [_p("", "string")]),
        _view("hasRole", [_p("role", "bytes32"), _p("account", _ADDR)], [_p("", "bool")]),
        _write("grantRole", [_p("role", "bytes32"), _p("account", _ADDR)]),
        _write("revokeRole", [_p("role", "bytes32"), _p("account", _ADDR)]),
        _view(
            "hasVoted",
            [_p("tokenID", "uint256"), _p("proposal", _ADDR)],
            [_p("", "uint8"), _p("", "bool")],
        ),
        _write("mint", mint_inputs, [_p("", "uint256")]),
        _view("name", [], [_p("", "string")]),
        _view("ownerOf", [_p("id", "uint256")], [_p("", _ADDR)]),
        _write(
            "propose",
            [_p("title", "string"), _p("start", "uint48"), _p("duration", "uint32")],
            [_p("", _ADDR)],
        ),
        _write("setArbiter", [_p("arbiter", _ADDR)]),
        _view("supply", [], [_p("", "uint256")]),
        _view("symbol", [], [_p("", "string")]),
        _view("tokenOf", [_p("owner", _ADDR)], token_of_outputs),
        _view("tokenURI", [_p("id", "uint256")], [_p("", "string")]),
        _view("version", [], [_p("", "string")], pure=True),
        _write("vote", [_p("tokenID", "uint256"), _p("proposal", _ADDR), _p("choice", "uint8")]),
        {
            "type": "event",
            "name": "Transfer",
            "anonymous": False,
            "inputs": [
                _p("from", _ADDR, indexed=True),
                _p("to", _ADDR, indexed=True),
                _p("id", "uint256", indexed=True),
            ],
        },
        {
            "type": "event",
            "name": "ProposalCreated",
            "anonymous": False,
            "inputs": [
                _p("contractAddress", _ADDR, indexed=False),
                _p("proposer", _ADDR, indexed=False),
                _p("start", "uint48", indexed=False),
                _p("duration", "uint32", indexed=False),
            ],
        },
        {
            "type": "event",
            "name": "ArbiterUpdated",
            "anonymous": False,
            "inputs": [_p("arbiter", _ADDR, indexed=True)],
        },
        {
            "type": "event",
            "name": "RoleGranted",
            "anonymous": False,
            "inputs": [
                _p("role", "bytes32", indexed=True),
                _p("account", _ADDR, indexed=True),
                _p("sender", _ADDR, indexed=True),
            ],
        },
        {
            "type": "event",
            "name": "RoleRevoked",
            "anonymous": False,
            "inputs": [
                _p("role", "bytes32", indexed=True),
                _p("account", _ADDR, indexed=True),
                _p("sender", _ADDR, indexed=True),
            ],
        },
        {
            "type": "error",
            "name": "AccessControlUnauthorizedAccount",
            "inputs": [_p("account", _ADDR), _p("neededRole", "bytes32")],
        },
    ]


sigillum_abi = freeze_abi(
    token_entries(
        mint_inputs=[_p("recipient", _ADDR)],
        token_of_outputs=[_p("", "uint256")],
    )
)

__all__ = ["sigillum_abi", "token_entries"]
