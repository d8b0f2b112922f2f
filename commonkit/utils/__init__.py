from .num_utils import (
    is_close_to_int,
    round_half_up,
    round_to_places,
    round_point,
    clamp_value,
)
from .default import value_or_default
from .seq_utils import find_index_where, compose_fns
from .map_utils import deep_merge, filter_remove_val

__all__ = [
    "is_close_to_int",
    "round_half_up",
    "round_to_places",
    "round_point",
    "clamp_value",
    "value_or_default",
    "find_index_where",
    "compose_fns",
    "deep_merge",
    "filter_remove_val",
]
