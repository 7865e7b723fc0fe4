"""
Registry state layout over the generic key-value store.

Each mapping owned by the registry lives in its own namespace of a
single store. Keys are ``"<namespace>:<key>"`` and values are
JSON text.
"""

import json
from typing import Any

from .models import Metadata
from .ports import ReadableStore

ADMIN_NAMESPACE = "admin"
METADATA_NAMESPACE = "metadata"
DENOMS_BY_CREATOR_NAMESPACE = "denoms_by_creator"


def admin_key(denom: str) -> str:
    return f"{ADMIN_NAMESPACE}:{denom}"


def metadata_key(denom: str) -> str:
    return f"{METADATA_NAMESPACE}:{denom}"


def creator_key(creator: str) -> str:
    return f"{DENOMS_BY_CREATOR_NAMESPACE}:{creator}"


def encode(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True)


def load_admin(store: ReadableStore, denom: str) -> str | None:
    """Load the admin of denom, or None if the denom was never created."""
    raw = store.get(admin_key(denom))
    return None if raw is None else json.loads(raw)


def load_metadata(store: ReadableStore, denom: str) -> Metadata | None:
    raw = store.get(metadata_key(denom))
    return None if raw is None else Metadata.from_dict(json.loads(raw))


def load_denoms_by_creator(store: ReadableStore, creator: str) -> list[str]:
    raw = store.get(creator_key(creator))
    return [] if raw is None else list(json.loads(raw))
