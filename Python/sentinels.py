class Singleton:
    """Class with a single instance

    Only subclasses are instantiated; each subclass gets its own instance.
    """

    def __new__(cls):
        if cls is Singleton:
            raise TypeError("Singleton must be subclassed")
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


class Done(Singleton):
    """Marks the end of a generating sequence.

    Use it as the sentinel when None is a legitimate item:

        generate(lambda: head, lambda n: n.next if n.has_next else DONE, sentinel=DONE)
    """

    __slots__ = ()

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memodict={}):
        return self

    def __reduce__(self):
        return Done, ()

    def __repr__(self):
        return 'DONE'


DONE = Done()
