class EmptyHeapError(KeyError):
    """Raised when peeking or popping from a heap with no elements"""


class MinMaxHeap:
    """Double-ended heap supporting O(1) access to both the min and the max

    Elements live in a flat list laid out as an implicit binary tree. Even
    depths are min levels (each node <= its descendants) and odd depths are
    max levels (each node >= its descendants), so the min is the root and the
    max is one of the root's children.

    Args:
        items (iterable, optional):
            Initial elements, heapified in O(n)
        key (callable, optional):
            Function extracting the comparison key from each element
    """
    def __init__(self, items=None, key=None):
        self.key = key
        self.heap = list(items) if items is not None else []
        for i in reversed(range(len(self.heap)//2)):
            self._push_down(i)

    def __len__(self):
        return len(self.heap)

    def __iter__(self):
        return iter(self.heap)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.heap)

    @classmethod
    def from_items(cls, items, key=None):
        return cls(items, key=key)

    def push(self, item):
        i = len(self)
        self.heap.append(item)
        self._push_up(i)

    def peek_min(self):
        return self.heap[self._find_min()]

    def peek_max(self):
        return self.heap[self._find_max()]

    def pop_min(self):
        min_index = self._find_min()
        return self._pop(min_index)

    def pop_max(self):
        max_index = self._find_max()
        return self._pop(max_index)

    def replace_min(self, item):
        """Pop the min and push item, with a single restore pass"""
        min_index = self._find_min()
        smallest = self.heap[min_index]
        self.heap[min_index] = item
        self._push_down(min_index)
        return smallest

    def replace_max(self, item):
        """Pop the max and push item, with a single restore pass"""
        max_index = self._find_max()
        largest = self.heap[max_index]
        self.heap[max_index] = item
        if max_index == 0:
            return largest
        if self._less(self.heap[max_index], self.heap[0]):
            self._swap(max_index, 0)
        self._push_down(max_index)
        return largest

    def is_valid(self):
        """Check every ancestor/descendant pair against the min-max property"""
        for position, item in enumerate(self.heap):
            before = self._less if self._is_on_min_level(position) else self._greater
            descendants = self._get_children(position)
            while descendants:
                descendant = descendants.pop()
                if before(self.heap[descendant], item):
                    return False
                descendants += self._get_children(descendant)
        return True

    def _pop(self, i):
        item = self.heap[i]
        last = self.heap.pop()
        if i < len(self):
            self.heap[i] = last
            self._push_down(i)
        return item

    def _find_min(self):
        if self.heap:
            return 0
        raise EmptyHeapError('find_min called on heap with no elements')

    def _find_max(self):
        if not self.heap:
            raise EmptyHeapError('find_max called on heap with no elements')
        if len(self) <= 2:
            return len(self) - 1
        return 1 if self._greater(self.heap[1], self.heap[2]) else 2

    def _less(self, a, b):
        if self.key is None:
            return a < b
        return self.key(a) < self.key(b)

    def _greater(self, a, b):
        return self._less(b, a)

    def _swap(self, i, j):
        self.heap[i], self.heap[j] = self.heap[j], self.heap[i]

    @staticmethod
    def _is_on_min_level(i):
        level = (i+1).bit_length() - 1
        return level % 2 == 0

    @staticmethod
    def _is_root(i):
        return i == 0

    @staticmethod
    def _get_parent(i):
        return (i-1)//2

    @staticmethod
    def _has_grandparent(i):
        return i > 2

    @staticmethod
    def _get_grandparent(i):
        return (i-3)//4

    def _get_children(self, i):
        left = 2*i+1
        right = 2*i+2
        return [child for child in (left, right) if child < len(self)]

    def _get_descendants(self, i):
        descendants = []
        for child in self._get_children(i):
            descendants += [child] + self._get_children(child)
        return descendants

    def _push_down(self, i):
        if self._is_on_min_level(i):
            self._push_down_iter(i, before=self._less)
        else:
            self._push_down_iter(i, before=self._greater)

    def _push_down_iter(self, i, before):
        while True:
            successors = self._get_descendants(i)
            if not successors:
                return
            m = successors[0]
            for idx in successors[1:]:
                if before(self.heap[idx], self.heap[m]):
                    m = idx
            if not before(self.heap[m], self.heap[i]):
                return
            self._swap(m, i)
            if m <= 2*i+2:
                return
            p = self._get_parent(m)
            if before(self.heap[p], self.heap[m]):
                self._swap(m, p)
            i = m

    def _push_up(self, i):
        if self._is_root(i):
            return
        p = self._get_parent(i)
        if self._is_on_min_level(i):
            if self._greater(self.heap[i], self.heap[p]):
                self._swap(i, p)
                self._push_up_iter(p, swap_cond=self._greater)
            else:
                self._push_up_iter(i, swap_cond=self._less)
        else:
            if self._less(self.heap[i], self.heap[p]):
                self._swap(i, p)
                self._push_up_iter(p, swap_cond=self._less)
            else:
                self._push_up_iter(i, swap_cond=self._greater)

    def _push_up_iter(self, i, swap_cond):
        while self._has_grandparent(i):
            gp = self._get_grandparent(i)
            if swap_cond(self.heap[i], self.heap[gp]):
                self._swap(i, gp)
                i = gp
            else:
                break
