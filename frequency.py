from collections import Counter
from typing import Dict, Hashable, Iterable


def count_frequencies(symbols: Iterable[Hashable]) -> Dict[Hashable, int]:
    """Count how many times each symbol occurs in ``symbols``.

    Keys keep the order in which each symbol first appears, which is the
    order leaves are created in when the tree is built.

    :param symbols: Any finite sequence of symbols (e.g. a ``str``).
    :type symbols: Iterable[Hashable]
    :returns: Mapping from symbol to occurrence count; empty for empty input.
    :rtype: Dict[Hashable, int]
    """
    return dict(Counter(symbols))
