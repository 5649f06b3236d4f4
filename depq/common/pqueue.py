from dataclasses import dataclass, field
import logging
from typing import Any

from .minmaxheap import EmptyHeapError, MinMaxHeap

logger = logging.getLogger(__name__)

_REMOVED = object() # placeholder data for lazily deleted entries

@dataclass(order=True)
class PQueueItem:
    """Wrapper for priority queue items

    Items should only be compared based on their priority, not data.

    Attributes:
        priority (Any):
            The priority of the item
        data (Any):
            The associated data
    """
    priority: Any
    data: Any=field(compare=False)
    def unwrapped(self):
        """Return the underlying (priority, data) tuple"""
        return self.priority, self.data

class PriorityQueue():
    """Double-ended priority queue backed by a min-max heap

    Data must be hashable; pushing data that is already queued updates its
    priority.

    Args:
        items (list, optional):
            An initial list of (priority, data) tuples
        maxlen (int, optional):
            The maximum number of items
        mode (str, ['min', 'max'])
            When maxlen is reached, which priority items should continue to be saved
    """
    def __init__(self, items=None, maxlen=None, mode='min'):
        if mode not in ['min', 'max']:
            raise ValueError("mode must be either 'min' or 'max'")
        self.mode = mode
        if maxlen is not None:
            if isinstance(maxlen, bool) or not isinstance(maxlen, int):
                raise TypeError('Expected maxlen to be of type int')
            if maxlen < 1:
                raise ValueError('maxlen must be positive')
        self.maxlen = maxlen

        self.lookup = {}
        for item in items or []:
            if not isinstance(item, tuple) or len(item) != 2:
                raise TypeError('PriorityQueue expects a list of (priority, data) tuples')
            entry = PQueueItem(*item)
            self.lookup[entry.data] = entry
        self.heap = MinMaxHeap.from_items(self.lookup.values())
        self.n_items = len(self.heap)

        if self.maxlen is not None:
            while len(self) > self.maxlen:
                self._eject_one()

    def __len__(self):
        return self.n_items

    def __contains__(self, data):
        return data in self.lookup

    def push(self, data, priority):
        """Add a new item or update the priority of an existing item"""
        if data in self.lookup:
            self.remove(data)
        item = PQueueItem(priority, data)
        if self.maxlen is not None and len(self) >= self.maxlen:
            should_eject = (
                (self.mode == 'max' and self._peek_min().priority < item.priority)
                or (self.mode == 'min' and self._peek_max().priority > item.priority)
            )
            if not should_eject:
                logger.debug('Queue full; dropping %r with priority %r', data, priority)
                return
            self._eject_one()
        self.heap.push(item)
        self.lookup[data] = item
        self.n_items += 1

    def remove(self, data):
        """Mark an existing item as removed.  Raise KeyError if not found."""
        entry = self.lookup.pop(data)
        entry.data = _REMOVED
        self.n_items -= 1
        if len(self.heap) > 2 * self.n_items:
            self._compact()

    def _compact(self):
        """Rebuild the heap from live entries, discarding removed ones"""
        self.heap = MinMaxHeap.from_items(self.lookup.values())

    def peek_min(self):
        """Return the lowest priority item without removing it"""
        return self._peek_min().data

    def _peek_min(self):
        """Return the lowest priority PQueueItem without removing it"""
        while self.heap:
            item = self.heap.peek_min()
            if item.data is not _REMOVED:
                return item
            self.heap.pop_min()
        raise EmptyHeapError('peek called on empty priority queue')

    def peek_max(self):
        """Return the highest priority item without removing it"""
        return self._peek_max().data

    def _peek_max(self):
        """Return the highest priority PQueueItem without removing it"""
        while self.heap:
            item = self.heap.peek_max()
            if item.data is not _REMOVED:
                return item
            self.heap.pop_max()
        raise EmptyHeapError('peek called on empty priority queue')

    def pop_min(self):
        """Remove and return the lowest priority item"""
        return self._pop(self.heap.pop_min)

    def pop_max(self):
        """Remove and return the highest priority item"""
        return self._pop(self.heap.pop_max)

    def _pop(self, pop_fn):
        while self.heap:
            item = pop_fn()
            if item.data is not _REMOVED:
                self.n_items -= 1
                del self.lookup[item.data]
                return item.data
        raise EmptyHeapError('pop called on empty priority queue')

    def _eject_one(self):
        if self.mode == 'min':
            data = self.pop_max()
        else:
            data = self.pop_min()
        logger.debug('Queue full; ejected %r', data)
        return data

    def items(self):
        """Return the list of live (priority, data) tuples, in heap order"""
        return [item.unwrapped() for item in self.heap if item.data is not _REMOVED]

    def __iter__(self):
        """Iterate over the data of live items, in heap order"""
        return iter(item.data for item in self.heap if item.data is not _REMOVED)
