from typing import Any, Callable, Dict, Mapping


def deep_merge(a: Mapping, b: Mapping) -> Dict:
    """
    Recursively merge ``b`` into ``a`` and return a new dict.

    Nested mappings present in both are merged; any other value in ``b``
    replaces the one in ``a``. Neither input is modified.
    """
    merged = dict(a)
    for key, b_val in b.items():
        a_val = merged.get(key)
        if isinstance(a_val, Mapping) and isinstance(b_val, Mapping):
            merged[key] = deep_merge(a_val, b_val)
        else:
            merged[key] = b_val
    return merged


def filter_remove_val(pred: Callable[[Any], bool], m: Mapping) -> Dict:
    """Return a new dict without the entries whose value satisfies ``pred``."""
    return {k: v for k, v in m.items() if not pred(v)}
