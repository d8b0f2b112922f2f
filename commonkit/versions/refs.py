"""
Asset references: ``(asset_key, version_key)`` pointers into a catalog.

A catalog maps asset keys to versioned assets. References resolve through
two lookups and never raise for missing entries; an unknown asset gives a
reference whose version is None.
"""

from typing import Any, Dict, Hashable, List, Mapping, Optional, Sequence, Tuple

from ..utils.seq_utils import find_index_where
from .asset import Asset, VersionRecord

AssetRef = Tuple[Hashable, Optional[Hashable]]
Catalog = Mapping[Hashable, Asset]


def get_current_ref(catalog: Catalog, asset_key: Hashable) -> AssetRef:
    """Reference to the current version of ``asset_key``."""
    asset = catalog.get(asset_key)
    if asset is None:
        return (asset_key, None)
    return (asset_key, asset.get("current"))


def get_ref_version(catalog: Catalog, ref: Optional[AssetRef]) -> Optional[VersionRecord]:
    """Version record a reference points to, or None if it does not resolve."""
    if ref is None:
        return None
    asset_key, version_key = ref
    asset = catalog.get(asset_key)
    if asset is None or version_key is None:
        return None
    return asset["versions"].get(version_key)


def is_ref_resolved(catalog: Catalog, ref: Optional[AssetRef]) -> bool:
    return get_ref_version(catalog, ref) is not None


def _ref_name(element: Mapping[str, Any], field: str) -> Optional[Hashable]:
    ref = element.get(field)
    return ref[0] if ref else None


def find_index_with_ref_name(coll: Sequence[Mapping[str, Any]], field: str, name: Hashable) -> Optional[int]:
    """Index of the first element whose ``field`` reference names ``name``."""
    return find_index_where(coll, lambda element: _ref_name(element, field) == name)


def find_element_with_ref_name(
    coll: Sequence[Mapping[str, Any]],
    field: str,
    name: Hashable,
) -> Optional[Mapping[str, Any]]:
    """
    First element whose ``field`` holds a reference to ``name``.

    Only the name part of the reference is compared, so any version matches.
    """
    index = find_index_with_ref_name(coll, field, name)
    return coll[index] if index is not None else None


def replace_element_with_ref_name(
    coll: Sequence[Mapping[str, Any]],
    field: str,
    element: Mapping[str, Any],
) -> List[Mapping[str, Any]]:
    """
    Replace the element referring to the same name as ``element``.

    Returns a new list; when nothing matches it is an unchanged copy.
    """
    replaced = list(coll)
    name = _ref_name(element, field)
    if name is None:
        return replaced
    index = find_index_with_ref_name(coll, field, name)
    if index is not None:
        replaced[index] = element
    return replaced
