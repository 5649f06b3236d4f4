from .common.minmaxheap import EmptyHeapError, MinMaxHeap
from .common.pqueue import PQueueItem, PriorityQueue

__all__ = ['EmptyHeapError', 'MinMaxHeap', 'PQueueItem', 'PriorityQueue']
