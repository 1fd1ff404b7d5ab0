from operator import attrgetter

from generating import generate

PARENT = 'parent'


def ancestors(obj, attribute=PARENT):
    """obj followed by obj.<attribute>, its <attribute>, ... up to the root

    The attribute is read while iterating, so every traversal sees the graph
    as it is at that moment.
    """
    return generate(lambda: obj, attrgetter(attribute))


def path(obj, attribute=PARENT):
    """list of nodes from the root down to obj"""
    nodes = list(ancestors(obj, attribute))
    nodes.reverse()
    return nodes
