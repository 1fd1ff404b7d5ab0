"""
A generating iterable is a lazy sequence described by an initial value and a
successor function that maps each value to the next one.

> The first item is initial().
> Every following item is successor(previous item).
> The sequence ends when an item is the sentinel (None by default).

The sentinel matches an item that is it, or, unless the sentinel is None,
an item that compares equal to it.

Nothing is evaluated until the sequence is iterated, and every call to iter()
starts over with a fresh call to initial(). This makes it easy to walk implicit
chains in object graphs:

    ancestors = generate(lambda: node, lambda n: n.parent)

If successor never returns the sentinel the sequence is unbounded, and anything
that needs the whole sequence (len, list, the last item) will not return.
"""

import enum
import logging

logger = logging.getLogger(__name__)


class IteratorUsageError(RuntimeError):
    """current was read outside of the window between a successful move_next()
    and the end of the sequence"""


class State(enum.Enum):
    NOT_STARTED = 'not started'
    ACTIVE = 'active'
    TERMINATED = 'terminated'


def generate(initial, successor, sentinel=None):
    """lazy sequence initial(), successor(item), ... ending at the first item that
    is the sentinel, or equals it when the sentinel is not None"""
    return GeneratingIterable(initial, successor, sentinel)


class GeneratingIterable:
    __slots__ = ('_initial', '_successor', '_sentinel')

    def __init__(self, initial, successor, sentinel=None):
        object.__setattr__(self, '_initial', initial)
        object.__setattr__(self, '_successor', successor)
        object.__setattr__(self, '_sentinel', sentinel)

    @property
    def initial(self):
        return self._initial

    @property
    def successor(self):
        return self._successor

    @property
    def sentinel(self):
        return self._sentinel

    def __iter__(self):
        return GeneratingIterator(self._initial, self._successor, self._sentinel)

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support attribute assignment".format(type(self).__name__))

    def __repr__(self):
        if self._sentinel is None:
            return 'generate({!r}, {!r})'.format(self._initial, self._successor)
        return 'generate({!r}, {!r}, sentinel={!r})'.format(self._initial, self._successor, self._sentinel)


class GeneratingIterator:
    """A single traversal of a GeneratingIterable.

    Either use the iterator protocol, or call move_next() and read current
    while it returns True. If initial or successor raise, the exception propagates
    unchanged and the iterator must not be used again.
    """

    __slots__ = ('_initial', '_successor', '_sentinel', '_state', '_current')

    def __init__(self, initial, successor, sentinel=None):
        self._initial = initial
        self._successor = successor
        self._sentinel = sentinel
        self._state = State.NOT_STARTED
        self._current = None

    @property
    def state(self):
        return self._state

    @property
    def current(self):
        if self._state is not State.ACTIVE:
            raise IteratorUsageError("no current value: iterator is {}".format(self._state.value))
        return self._current

    def move_next(self):
        if self._state is State.TERMINATED:
            return False

        if self._state is State.NOT_STARTED:
            logger.debug("starting traversal of %r", self._initial)
            value = self._initial()
        else:
            value = self._successor(self._current)

        if self._is_sentinel(value):
            self._state = State.TERMINATED
            self._current = None
            logger.debug("traversal of %r terminated", self._initial)
            return False

        self._state = State.ACTIVE
        self._current = value
        return True

    def _is_sentinel(self, value):
        if value is self._sentinel:
            return True
        return self._sentinel is not None and value == self._sentinel

    def __iter__(self):
        return self

    def __next__(self):
        if not self.move_next():
            raise StopIteration()
        return self._current

    def __repr__(self):
        return 'GeneratingIterator({})'.format(self._state.value)
