"""
AccessControl helpers shared by contracts that gate functions on roles.

Roles are addressed by `role_hash(name)`; callers pass the plain role name.
"""

from __future__ import annotations

from typing import Optional

from ..types.core import StateChangeResult
from ..utils.hash import role_hash
from .client import ContractClient


async def has_role(client: ContractClient, role: str, account: str, *, op: Optional[str] = None) -> bool:
    return bool(await client.call("hasRole", role_hash(role), account, op=op))


async def grant_role(client: ContractClient, role: str, account: str, *, op: Optional[str] = None) -> StateChangeResult[None]:
    return await client.transact("grantRole", role_hash(role), account, op=op)


async def revoke_role(client: ContractClient, role: str, account: str, *, op: Optional[str] = None) -> StateChangeResult[None]:
    return await client.transact("revokeRole", role_hash(role), account, op=op)


__all__ = ["has_role", "grant_role", "revoke_role"]
