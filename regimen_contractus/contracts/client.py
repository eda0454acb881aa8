"""
regimen_contractus.contracts.client
===================================

A thin, ABI-driven client bound to one deployed contract instance:

- `deploy()` submits a creation tx, waits for the receipt and binds the minted address
- `attach()` binds an existing address (no I/O, no code check)
- `call()` encodes, runs `eth_call` and decodes the return value
- `transact()` sends a tx, waits for inclusion and returns a `StateChangeResult`
- `transact_for_event()` additionally pulls a field from the first matching event

Every failure is logged once as ``{Owner}#{operation}: ...`` at error level and
re-raised. Raw `RpcError`s from the connection are translated to `CallError`
with a structured code; everything else already in the error taxonomy passes
through unchanged.

Example
-------
    conn = ChainConnection.from_url("http://127.0.0.1:8545")
    client = ContractClient.attach(arbiter_abi, ClientOptions(connection=conn, address="0x…"), owner="Arbiter")
    ok = await client.call("eligibility", token_address)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

from ..address import normalize_address
from ..artifacts import resolve_bytecode
from ..config import ClientOptions
from ..errors import (
    CallError,
    DeploymentError,
    ErrorCode,
    EventNotFoundError,
    JsonRpcCode,
    RpcError,
    TransactionIncompleteError,
)
from ..logger import LIBRARY_LOGGER, ClientLogger, create_logger
from ..rpc.connection import Connection
from ..types.abi import AbiModel
from ..types.core import DeployResult, Receipt, StateChangeResult
from ..utils.bytes import from_hex, to_hex
from .codec import decode_return, decode_revert, encode_call, encode_constructor
from .events import event_field, find_first_event

_REVERT_PREFIX = "execution reverted"


@dataclass(frozen=True)
class ContractHandle:
    """Address + ABI + connection for one deployed contract. Never mutated."""

    address: str
    abi: Sequence[Mapping[str, Any]]
    connection: Connection


def _revert_data(data: Any) -> Optional[bytes]:
    # Nodes report revert payloads either as a bare hex string or nested under "data".
    if isinstance(data, Mapping):
        data = data.get("data")
    if isinstance(data, str) and data.startswith(("0x", "0X")):
        try:
            return from_hex(data)
        except ValueError:
            return None
    return None


def _reason_from_message(message: str) -> Optional[str]:
    # "execution reverted: recipient already has token" -> "recipient already has token"
    head, sep, tail = message.partition(":")
    if sep and _REVERT_PREFIX in head.lower():
        return tail.strip() or None
    return None


class ContractClient:
    """
    Generic contract lifecycle used by every model.

    `owner` is the model class name used in log messages (e.g. "Arbiter").
    """

    def __init__(
        self,
        handle: ContractHandle,
        *,
        owner: str,
        logger: ClientLogger,
        deployment: Optional[DeployResult] = None,
    ):
        self._handle = handle
        self._model = AbiModel.from_list(handle.abi)
        self._owner = owner
        self._logger = logger
        self._deployment = deployment

    # ------------------------------------------------------------------ construction

    @staticmethod
    def _make_logger(options: ClientOptions, owner: str) -> ClientLogger:
        return create_logger(options.log_level, name=f"{LIBRARY_LOGGER}.{owner}", contract=owner)

    @classmethod
    def attach(cls, abi: Sequence[Mapping[str, Any]], options: ClientOptions, *, owner: str) -> "ContractClient":
        """Bind to `options.address`. Performs no chain I/O."""
        if not options.address:
            raise ValueError(f"{owner}#attach: an address is required")
        handle = ContractHandle(
            address=normalize_address(options.address),
            abi=abi,
            connection=options.resolved_connection(),
        )
        return cls(handle, owner=owner, logger=cls._make_logger(options, owner))

    @classmethod
    async def deploy(
        cls,
        abi: Sequence[Mapping[str, Any]],
        args: Sequence[Any],
        options: ClientOptions,
        *,
        owner: str,
        bytecode: Union[bytes, str, None] = None,
        artifacts_dir: Union[str, Path, None] = None,
        artifact: Optional[str] = None,
    ) -> "ContractClient":
        """
        Submit a contract-creation tx with the creation bytecode + encoded
        constructor `args`, wait for inclusion and return a client bound to the
        new address.

        Bytecode is `bytecode` when given, otherwise read from the compiled
        artifact named `artifact` (defaults to `owner`) under `artifacts_dir`.
        """
        logger = cls._make_logger(options, owner)
        connection = options.resolved_connection()
        model = AbiModel.from_list(abi)

        try:
            code = resolve_bytecode(artifact or owner, bytecode=bytecode, artifacts_dir=artifacts_dir)
            data = code + encode_constructor(model.constructor, args)
            creator = await connection.signer_address()
            tx_hash = await connection.send_transaction(None, data)
            raw_receipt = await connection.wait_for_receipt(tx_hash)
            if raw_receipt is None:
                raise TransactionIncompleteError("transaction did not complete", tx_hash=tx_hash)
            receipt = Receipt.from_rpc_dict(raw_receipt)
            if not receipt.succeeded:
                raise CallError("contract creation reverted", code=ErrorCode.CALL_EXCEPTION, method="constructor")
            if not receipt.contract_address:
                raise DeploymentError("receipt carries no contract address", tx_hash=tx_hash)
            chain_id = await connection.chain_id()
        except RpcError as exc:
            err = _translate_rpc_error(exc, "constructor", model)
            logger.error("%s#deploy: failed to deploy contract: %s", owner, err)
            raise err from exc
        except Exception as exc:
            logger.error("%s#deploy: failed to deploy contract: %s", owner, exc)
            raise

        logger.debug(
            '%s#deploy: deployed contract using "%s" with transaction hash "%s" on chain "%s"',
            owner,
            creator,
            tx_hash,
            chain_id,
        )

        deployment = DeployResult(address=receipt.contract_address, deploy_tx_hash=tx_hash, receipt=receipt)
        handle = ContractHandle(address=receipt.contract_address, abi=abi, connection=connection)
        return cls(handle, owner=owner, logger=logger, deployment=deployment)

    # ------------------------------------------------------------------ accessors

    @property
    def handle(self) -> ContractHandle:
        return self._handle

    @property
    def address(self) -> str:
        return self._handle.address

    @property
    def abi(self) -> Sequence[Mapping[str, Any]]:
        return self._handle.abi

    @property
    def connection(self) -> Connection:
        return self._handle.connection

    @property
    def model(self) -> AbiModel:
        return self._model

    @property
    def deployment(self) -> Optional[DeployResult]:
        """Set for clients created by `deploy()`, None for attached ones."""
        return self._deployment

    @property
    def logger(self) -> ClientLogger:
        return self._logger

    @property
    def owner(self) -> str:
        return self._owner

    # ------------------------------------------------------------------ reads

    async def _call(self, fn: str, args: Sequence[Any]) -> Any:
        entry = self._model.get_function(fn)
        data = encode_call(entry, args)
        try:
            raw = await self._handle.connection.call(self._handle.address, data)
        except RpcError as exc:
            raise _translate_rpc_error(exc, fn, self._model) from exc
        return decode_return(entry, raw)

    async def call(self, fn: str, *args: Any, op: Optional[str] = None) -> Any:
        """
        Read-only call. One output is unwrapped, several come back as a tuple.
        `op` names the calling model method in log messages (defaults to `fn`).
        """
        try:
            return await self._call(fn, args)
        except Exception as exc:
            self.log_failure(op or fn, exc)
            raise

    async def call_optional(self, fn: str, *args: Any, op: Optional[str] = None) -> Any:
        """Like `call()`, but not-found codes (empty/undecodable data) give None."""
        try:
            return await self._call(fn, args)
        except CallError as exc:
            if exc.is_not_found:
                return None
            self.log_failure(op or fn, exc)
            raise
        except Exception as exc:
            self.log_failure(op or fn, exc)
            raise

    # ------------------------------------------------------------------ writes

    async def _transact(self, fn: str, args: Sequence[Any], value: int) -> Receipt:
        entry = self._model.get_function(fn)
        data = encode_call(entry, args)
        conn = self._handle.connection
        try:
            tx_hash = await conn.send_transaction(self._handle.address, data, value=value)
            raw_receipt = await conn.wait_for_receipt(tx_hash)
        except RpcError as exc:
            raise _translate_rpc_error(exc, fn, self._model) from exc
        if raw_receipt is None:
            raise TransactionIncompleteError("transaction did not complete", tx_hash=tx_hash)
        receipt = Receipt.from_rpc_dict(raw_receipt)
        if not receipt.succeeded:
            raise CallError("transaction reverted", code=ErrorCode.CALL_EXCEPTION, method=fn)
        return receipt

    async def transact(self, fn: str, *args: Any, op: Optional[str] = None, value: int = 0) -> StateChangeResult[None]:
        """Send a state-changing tx and wait for inclusion; `result` is None."""
        try:
            receipt = await self._transact(fn, args, value)
        except Exception as exc:
            self.log_failure(op or fn, exc)
            raise
        return StateChangeResult(result=None, transaction_receipt=receipt)

    async def transact_for_event(
        self,
        fn: str,
        *args: Any,
        event: str,
        field: Union[str, int],
        op: Optional[str] = None,
        value: int = 0,
    ) -> StateChangeResult[Any]:
        """
        Send a tx and return `field` (name or position) of the first `event`
        in the receipt logs. A missing event raises EventNotFoundError.
        """
        try:
            receipt = await self._transact(fn, args, value)
            decoded = find_first_event(self._handle.abi, receipt, event)
            if decoded is None:
                raise EventNotFoundError(event, tx_hash=receipt.transaction_hash)
            result = event_field(decoded, field)
        except Exception as exc:
            self.log_failure(op or fn, exc)
            raise
        return StateChangeResult(result=result, transaction_receipt=receipt)

    # ------------------------------------------------------------------ logging

    def log_failure(self, op: str, exc: BaseException) -> None:
        self._logger.error("%s#%s: %s", self._owner, op, exc)


def _translate_rpc_error(exc: RpcError, fn: Optional[str], model: Optional[AbiModel] = None) -> CallError:
    """
    Map a connection-level RpcError to a CallError.

    Revert payloads are decoded into reason / custom error; transport failures
    become NETWORK_ERROR; anything else is UNKNOWN_ERROR.
    """
    if exc.is_transport:
        return CallError(exc.message, code=ErrorCode.NETWORK_ERROR, method=fn)

    payload = _revert_data(exc.data)
    reverted = (
        payload is not None
        or exc.code == JsonRpcCode.EXECUTION_REVERTED
        or _REVERT_PREFIX in exc.message.lower()
    )
    if not reverted:
        return CallError(exc.message, code=ErrorCode.UNKNOWN_ERROR, method=fn)

    info = decode_revert(payload or b"", model)
    reason = info.reason if info.reason is not None else _reason_from_message(exc.message)
    return CallError(
        exc.message,
        code=ErrorCode.CALL_EXCEPTION,
        reason=reason,
        error_name=info.error_name,
        error_args=info.error_args,
        method=fn,
        data=to_hex(payload) if payload is not None else None,
    )


__all__ = ["ContractHandle", "ContractClient"]
