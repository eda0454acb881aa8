"""
Compiled contract artifacts (Foundry / Hardhat JSON).

Deployments need creation bytecode. It is either passed explicitly or read
from `<artifacts_dir>/<Name>.sol/<Name>.json`, where the artifacts directory
comes from the caller or from CONTRACTUS_ARTIFACTS_DIR.

Both artifact shapes are accepted:
  Foundry:  {"abi": [...], "bytecode": {"object": "0x..."}}
  Hardhat:  {"abi": [...], "bytecode": "0x..."}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

from .config import SDKConfig
from .errors import ArtifactError
from .utils.bytes import ensure_bytes, from_hex


@dataclass(frozen=True)
class Artifact:
    name: str
    abi: Sequence[Mapping[str, Any]]
    bytecode: bytes
    path: Optional[str] = None


def artifact_path(name: str, artifacts_dir: Union[str, Path]) -> Path:
    return Path(artifacts_dir) / f"{name}.sol" / f"{name}.json"


def _extract_bytecode(obj: Mapping[str, Any]) -> Optional[str]:
    bc = obj.get("bytecode")
    if isinstance(bc, Mapping):
        bc = bc.get("object")
    if isinstance(bc, str) and bc not in ("", "0x"):
        return bc
    return None


@lru_cache(maxsize=32)
def load_artifact(path: Union[str, Path]) -> Artifact:
    """Read and parse one artifact file. Results are cached per path."""
    p = Path(path)
    try:
        obj = json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ArtifactError("artifact not found", path=str(p)) from e
    except ValueError as e:
        raise ArtifactError("artifact is not valid JSON", path=str(p)) from e
    if not isinstance(obj, Mapping):
        raise ArtifactError("artifact must be a JSON object", path=str(p))

    bc = _extract_bytecode(obj)
    if bc is None:
        raise ArtifactError("artifact has no creation bytecode", path=str(p))
    try:
        bytecode = from_hex(bc)
    except ValueError as e:
        raise ArtifactError("artifact bytecode is not valid hex", path=str(p)) from e

    abi = obj.get("abi") or []
    return Artifact(name=p.stem, abi=tuple(abi), bytecode=bytecode, path=str(p))


def resolve_bytecode(
    name: str,
    *,
    bytecode: Union[bytes, str, None] = None,
    artifacts_dir: Union[str, Path, None] = None,
) -> bytes:
    """
    Creation bytecode for contract `name`: explicit `bytecode` wins, otherwise
    the artifact under `artifacts_dir` (or CONTRACTUS_ARTIFACTS_DIR).
    """
    if bytecode is not None:
        return ensure_bytes(bytecode)
    directory = artifacts_dir or SDKConfig.from_env().artifacts_dir
    if not directory:
        raise ArtifactError(f"no bytecode given for {name} and no artifacts directory configured")
    return load_artifact(artifact_path(name, directory)).bytecode


__all__ = ["Artifact", "artifact_path", "load_artifact", "resolve_bytecode"]
