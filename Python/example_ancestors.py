from api import ancestors, path
from stream import length


class Node:
    def __init__(self, name, parent=None):
        self.name = name
        self.parent = parent

    def __repr__(self):
        return self.name


if __name__ == "__main__":
    root = Node("/")
    usr = Node("usr", root)
    lib = Node("lib", usr)
    python = Node("python3", lib)

    chain = ancestors(python)
    print(list(chain))
    print(path(python))

    # the chain is read live, so re-parenting shows up on the next traversal
    lib.parent = root
    print(list(chain), length(chain))
