"""
Versioned assets: an append-style history of payload snapshots per asset.

An asset is a plain dict::

    {"name": "logo", "current": 1700000000000, "versions": {1700000000000: {...}}}

Each version record carries ``name``, ``modified_time`` (equal to its key in
``versions``) and ``starred``; ``mutation`` is present on records written by
``mutate_version``. Version keys are opaque but must be orderable; epoch
milliseconds are used when a payload arrives without a ``modified_time``.

Every function returns a new asset and leaves its input untouched. An asset
always holds at least one version and ``current`` always names one of them.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, Hashable, List, Mapping, Optional

from ..utils.map_utils import filter_remove_val

Asset = Dict[str, Any]
VersionRecord = Dict[str, Any]
VersionKey = Hashable


def timestamp_ms() -> int:
    """Current time in integer epoch milliseconds."""
    return int(time.time() * 1000)


def _stamp(payload: Mapping[str, Any], name: str) -> VersionRecord:
    record = dict(payload)
    if record.get("modified_time") is None:
        record["modified_time"] = timestamp_ms()
    record["name"] = name
    record["starred"] = False
    return record


def new_asset(name: str, payload: Mapping[str, Any], modified_time: Optional[VersionKey] = None) -> Asset:
    """
    Create an asset whose history starts with ``payload``.

    Args:
        name: Asset name, copied onto every version
        payload: First version record
        modified_time: Version key; falls back to the payload's own
            ``modified_time``, then to the current time

    Returns:
        A single-version asset with ``current`` set to that version
    """
    record = dict(payload)
    if modified_time is not None:
        record["modified_time"] = modified_time
    record = _stamp(record, name)
    key = record["modified_time"]
    return {"name": name, "current": key, "versions": {key: record}}


def current_version(asset: Asset) -> VersionRecord:
    return asset["versions"][asset["current"]]


def get_version(asset: Optional[Asset], key: VersionKey) -> Optional[VersionRecord]:
    """Version record under ``key``, or None if the asset or key is missing."""
    if asset is None:
        return None
    return asset["versions"].get(key)


def version_keys(asset: Asset) -> List[VersionKey]:
    """Version keys in ascending order."""
    return sorted(asset["versions"])


def add_version(asset: Asset, payload: Mapping[str, Any]) -> Asset:
    """
    Append ``payload`` as a new version and make it current.

    The payload is stamped with the current time if it has no
    ``modified_time`` and is stored unstarred under the asset's name. If a
    version with the same key already exists the asset is returned unchanged.
    """
    record = _stamp(payload, asset["name"])
    key = record["modified_time"]
    if key in asset["versions"]:
        return asset
    return {**asset, "current": key, "versions": {**asset["versions"], key: record}}


def replace_current(asset: Asset, payload: Mapping[str, Any]) -> Asset:
    """
    Overwrite the current version with ``payload`` without adding history.

    The record keeps the current key as its ``modified_time`` and keeps its
    ``starred`` flag unless the payload sets one.
    """
    key = asset["current"]
    existing = asset["versions"].get(key, {})
    record = dict(payload)
    record.setdefault("starred", existing.get("starred", False))
    record["modified_time"] = key
    record["name"] = asset["name"]
    return {**asset, "versions": {**asset["versions"], key: record}}


def set_version(asset: Asset, payload: Mapping[str, Any]) -> Asset:
    """
    Point ``current`` at ``payload["modified_time"]``.

    The key is not checked; callers select versions that already exist.
    """
    return {**asset, "current": payload["modified_time"]}


def mutate_version(mutation: Hashable, asset: Asset, payload: Mapping[str, Any]) -> Asset:
    """
    Record an edit, coalescing consecutive edits that share a mutation tag.

    If the current version was written by the same ``mutation`` it is
    replaced in place; otherwise the payload becomes a new version. The tag
    is stored on the resulting record.
    """
    tagged = {**payload, "mutation": mutation}
    if current_version(asset).get("mutation") == mutation:
        return replace_current(asset, tagged)
    return add_version(asset, tagged)


def delete_version(asset: Asset, key: VersionKey) -> Asset:
    """
    Remove the version under ``key``.

    Removing the only version, or a key that is not present, returns the
    asset unchanged. When the current version is removed, the highest
    remaining key becomes current.
    """
    versions = asset["versions"]
    if key not in versions or len(versions) <= 1:
        return asset
    remaining = {k: v for k, v in versions.items() if k != key}
    current = asset["current"]
    if current == key:
        current = max(remaining)
    return {**asset, "current": current, "versions": remaining}


def star_version(asset: Asset, key: VersionKey, starred: bool = True) -> Asset:
    """Set or clear the starred flag of one version. Missing keys are ignored."""
    record = asset["versions"].get(key)
    if record is None:
        return asset
    return {**asset, "versions": {**asset["versions"], key: {**record, "starred": starred}}}


def remove_unused_versions(
    asset: Asset,
    is_used: Optional[Callable[[VersionRecord], bool]] = None,
) -> Asset:
    """
    Drop every version that is not current, not starred and not in use.

    Args:
        asset: Asset to prune
        is_used: Extra keep predicate over version records; by default only
            the current and starred versions survive

    Returns:
        The pruned asset
    """
    if is_used is None:
        is_used = lambda record: False
    current = asset["current"]

    def unused(record: VersionRecord) -> bool:
        return (
            record["modified_time"] != current
            and not record.get("starred", False)
            and not is_used(record)
        )

    return {**asset, "versions": filter_remove_val(unused, asset["versions"])}


def rename(asset: Asset, name: str) -> Asset:
    """Rename the asset and every one of its versions."""
    versions = {k: {**record, "name": name} for k, record in asset["versions"].items()}
    return {**asset, "name": name, "versions": versions}
