from functools import reduce
from typing import Any, Callable, Iterable, Optional, Sequence


def find_index_where(coll: Iterable[Any], pred: Callable[[Any], bool]) -> Optional[int]:
    """Return the index of the first element matching ``pred``, or None."""
    for index, element in enumerate(coll):
        if pred(element):
            return index
    return None


def compose_fns(fns: Sequence[Callable[[Any], Any]]) -> Callable[[Any], Any]:
    """
    Compose single-argument functions left to right.

    ``compose_fns([f, g])(x) == g(f(x))``. An empty sequence gives identity.
    """
    fns = tuple(fns)

    def composed(value: Any) -> Any:
        return reduce(lambda acc, fn: fn(acc), fns, value)

    return composed
