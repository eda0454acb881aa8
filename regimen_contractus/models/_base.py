"""Shared plumbing for the model classes: options and the composed ContractClient."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..config import ClientOptions
from ..contracts.client import ContractClient
from ..rpc.connection import Connection
from ..types.core import DeployResult


def client_options(
    connection: Connection,
    *,
    address: Optional[str] = None,
    debug: bool = False,
    silent: bool = False,
    signer_address: Optional[str] = None,
) -> ClientOptions:
    return ClientOptions(
        connection=connection,
        address=address,
        debug=debug,
        silent=silent,
        signer_address=signer_address,
    )


class ContractModel:
    """A model wraps exactly one ContractClient and never mutates it."""

    def __init__(self, client: ContractClient):
        self._client = client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(address={self.address()!r})"

    @classmethod
    def _attach_client(cls, abi: Sequence[Mapping[str, Any]], address: str, connection: Connection, **opts: Any) -> ContractClient:
        return ContractClient.attach(abi, client_options(connection, address=address, **opts), owner=cls.__name__)

    @property
    def client(self) -> ContractClient:
        return self._client

    @property
    def deployment(self) -> Optional[DeployResult]:
        return self._client.deployment

    def address(self) -> str:
        """The contract address, lowercase."""
        return self._client.address


__all__ = ["ContractModel", "client_options"]
