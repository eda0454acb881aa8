from __future__ import annotations

from ._base import freeze_abi
from .sigillum import token_entries

sigillum_ordo_administratorum_abi = freeze_abi(
    token_entries(
        mint_inputs=[
            {"name": "recipient", "internalType": "address", "type": "address"},
            {"name": "rank", "internalType": "bytes32", "type": "bytes32"},
        ],
        token_of_outputs=[
            {
                "name": "",
                "internalType": "struct SigillumOrdoAdministratorum.Token",
                "type": "tuple",
                "components": [
                    {"name": "id", "internalType": "uint256", "type": "uint256"},
                    {"name": "rank", "internalType": "bytes32", "type": "bytes32"},
                ],
            }
        ],
    )
)

__all__ = ["sigillum_ordo_administratorum_abi"]
