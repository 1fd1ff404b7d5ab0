"""
Consumers for sequences that may be unbounded.

take() is always safe. last() and length() walk the whole sequence and never
return if it has no end.
"""

from itertools import islice


def take(n, iterable):
    for _, item in zip(range(n), iterable):
        yield item


def last(iterable):
    """final item of a finite sequence"""
    missing = item = object()
    for item in iterable:
        pass
    if item is missing:
        raise ValueError("last() of an empty sequence")
    return item


def length(iterable):
    """number of items in a finite sequence"""
    n = 0
    for _ in iterable:
        n += 1
    return n


def nth(n, iterable, default=None):
    """item at position n, or default if the sequence is shorter"""
    return next(islice(iterable, n, None), default)
