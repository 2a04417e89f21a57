"""Bundled hiragana bigram model and lookup helpers.

The frequency table is a process-wide constant.  Analyzers hold a reference
to :data:`JP2_CHAR_CONTEXT` rather than a copy, so any number of instances
can share it across threads without locking.
"""

from jpcontext.models.jp2charcontext import JP2_CHAR_CONTEXT

#: Number of hiragana characters addressed by the table (orders 0-82).
HIRAGANA_COUNT: int = 83

#: Number of frequency categories (0 = never co-occurs, 5 = most common).
NUM_OF_CATEGORY: int = 6

__all__ = ["HIRAGANA_COUNT", "JP2_CHAR_CONTEXT", "NUM_OF_CATEGORY", "get_category"]


def get_category(prev_order: int, order: int) -> int:
    """Return the frequency category for the ordered pair *prev_order*, *order*.

    :param prev_order: Hiragana order of the preceding character (0-82).
    :param order: Hiragana order of the current character (0-82).
    :returns: An integer category in ``range(NUM_OF_CATEGORY)``.
    :raises IndexError: If either order is outside the table.
    """
    if not (0 <= prev_order < HIRAGANA_COUNT and 0 <= order < HIRAGANA_COUNT):
        msg = f"hiragana order out of range: ({prev_order}, {order})"
        raise IndexError(msg)
    return JP2_CHAR_CONTEXT[prev_order][order]
