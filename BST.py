class InvalidArgument(ValueError):
    """Raised when a caller passes None where an element or callback is required."""


class BSTNode:
    def __init__(self, element):
        self.element = element
        self.left = None
        self.right = None


def _compare(a, b):
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class BST:
    """
    Unbalanced binary search tree keyed by the elements' own ordering.

    Inserting an element whose key is already present replaces the stored
    element and leaves the size unchanged. Nothing is ever removed except
    through clear().
    """

    def __init__(self):
        self.root = None
        self._size = 0

    def insert(self, element):
        if element is None:
            raise InvalidArgument("cannot insert None")

        if self.root is None:
            self.root = BSTNode(element)
            self._size += 1
            return

        node = self.root
        while True:
            cmp = _compare(element, node.element)
            if cmp == 0:
                node.element = element
                return
            if cmp < 0:
                if node.left is None:
                    node.left = BSTNode(element)
                    self._size += 1
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = BSTNode(element)
                    self._size += 1
                    return
                node = node.right

    def search(self, element):
        """Return the stored element equal to `element`, or None."""
        if element is None:
            raise InvalidArgument("cannot search for None")

        node = self.root
        while node is not None:
            cmp = _compare(element, node.element)
            if cmp == 0:
                return node.element
            node = node.left if cmp < 0 else node.right
        return None

    def ascending(self):
        """Yields elements lowest → highest."""
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.element
            node = node.right

    def descending(self):
        """Yields elements highest → lowest."""
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield node.element
            node = node.left

    def traverse_ascending(self, visit):
        if visit is None:
            raise InvalidArgument("visit callback cannot be None")
        for element in self.ascending():
            visit(element)

    def traverse_descending(self, visit):
        if visit is None:
            raise InvalidArgument("visit callback cannot be None")
        for element in self.descending():
            visit(element)

    def height(self):
        # level-by-level walk; a sorted load degrades this to size()
        levels = 0
        level = [self.root] if self.root is not None else []
        while level:
            levels += 1
            level = [child for n in level for child in (n.left, n.right) if child is not None]
        return levels

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def clear(self):
        self.root = None
        self._size = 0

    def __len__(self):
        return self._size

    def __iter__(self):
        return self.ascending()

    def __contains__(self, element):
        return self.search(element) is not None
