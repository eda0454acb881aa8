"""Client for the Regimen contract, the token-registry predecessor of the Arbiter."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..abis import regimen_abi
from ..contracts.client import ContractClient
from ..rpc.connection import Connection
from ..types.core import StateChangeResult
from ._base import ContractModel, client_options


class Regimen(ContractModel):
    @classmethod
    def attach(
        cls,
        address: str,
        *,
        connection: Connection,
        debug: bool = False,
        silent: bool = False,
        signer_address: Optional[str] = None,
    ) -> "Regimen":
        return cls(
            cls._attach_client(
                regimen_abi, address, connection, debug=debug, silent=silent, signer_address=signer_address
            )
        )

    # Older callers construct Regimen clients via `init`.
    init = attach

    @classmethod
    async def deploy(
        cls,
        *,
        connection: Connection,
        debug: bool = False,
        silent: bool = False,
        signer_address: Optional[str] = None,
        bytecode: Union[bytes, str, None] = None,
        artifacts_dir: Union[str, Path, None] = None,
    ) -> "Regimen":
        client = await ContractClient.deploy(
            regimen_abi,
            (),
            client_options(connection, debug=debug, silent=silent, signer_address=signer_address),
            owner=cls.__name__,
            bytecode=bytecode,
            artifacts_dir=artifacts_dir,
        )
        return cls(client)

    async def add_token(self, token: str) -> StateChangeResult[None]:
        """Register a token contract whose holders may vote. Owner only."""
        return await self._client.transact("addToken", token, op="add_token")

    async def can_vote(self, token: str) -> bool:
        return bool(await self._client.call("canVote", token, op="can_vote"))

    async def remove_token(self, token: str) -> StateChangeResult[None]:
        return await self._client.transact("removeToken", token, op="remove_token")

    async def version(self) -> str:
        return await self._client.call("version")


__all__ = ["Regimen"]
