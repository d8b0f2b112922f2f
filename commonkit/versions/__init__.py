"""
Copy-on-write version history for named assets, and references into a
catalog of such assets.
"""

from .asset import (
    Asset,
    VersionRecord,
    timestamp_ms,
    new_asset,
    current_version,
    get_version,
    version_keys,
    add_version,
    replace_current,
    set_version,
    mutate_version,
    delete_version,
    star_version,
    remove_unused_versions,
    rename,
)
from .refs import (
    AssetRef,
    Catalog,
    get_current_ref,
    get_ref_version,
    is_ref_resolved,
    find_index_with_ref_name,
    find_element_with_ref_name,
    replace_element_with_ref_name,
)

__all__ = [
    "Asset",
    "VersionRecord",
    "timestamp_ms",
    "new_asset",
    "current_version",
    "get_version",
    "version_keys",
    "add_version",
    "replace_current",
    "set_version",
    "mutate_version",
    "delete_version",
    "star_version",
    "remove_unused_versions",
    "rename",
    "AssetRef",
    "Catalog",
    "get_current_ref",
    "get_ref_version",
    "is_ref_resolved",
    "find_index_with_ref_name",
    "find_element_with_ref_name",
    "replace_element_with_ref_name",
]
