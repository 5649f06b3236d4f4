import logging

import pytest

from ..common.minmaxheap import EmptyHeapError
from ..common.pqueue import PQueueItem, PriorityQueue

def test_basics():
    queue = PriorityQueue()
    assert not queue
    queue.push('foo', 10)
    queue.push('bar', 9)
    queue.push('baz', 11)
    assert queue
    assert 'foo' in queue
    assert queue.peek_min() == 'bar'
    assert queue.peek_max() == 'baz'
    assert queue.pop_min() == 'bar'
    assert len(queue) == 2
    assert queue.pop_max() == 'baz'
    assert queue.peek_min() == queue.peek_max() == 'foo'
    assert 'bar' not in queue

def test_empty():
    queue = PriorityQueue()
    for op in (queue.peek_min, queue.peek_max, queue.pop_min, queue.pop_max):
        with pytest.raises(EmptyHeapError):
            op()

def test_initial_items():
    queue = PriorityQueue([(3, 'c'), (1, 'a'), (2, 'b'), (5, 'a')])
    assert len(queue) == 3
    assert queue.peek_min() == 'b'
    assert queue.peek_max() == 'a'
    assert sorted(queue.items()) == [(2, 'b'), (3, 'c'), (5, 'a')]

def test_invalid_arguments():
    with pytest.raises(ValueError):
        PriorityQueue(mode='median')
    with pytest.raises(TypeError):
        PriorityQueue(maxlen=2.5)
    with pytest.raises(TypeError):
        PriorityQueue(maxlen=True)
    with pytest.raises(ValueError):
        PriorityQueue(maxlen=0)
    with pytest.raises(TypeError):
        PriorityQueue(['foo', 'bar'])

def test_maxlen():
    queue = PriorityQueue(maxlen=3, mode='max')
    queue.push('foo', 10)
    queue.push('bar', 7)
    queue.push('baz', 15)
    queue.push('fiz', 9)
    queue.push('buz', 12)
    assert sorted(queue) == ['baz', 'buz', 'foo']
    assert len(queue) == 3
    assert queue.pop_min() == 'foo'
    assert queue.pop_max() == 'baz'

    queue = PriorityQueue(maxlen=3, mode='min')
    queue.push('foo', 10)
    queue.push('bar', 7)
    queue.push('baz', 15)
    queue.push('fiz', 9)
    queue.push('buz', 12)
    assert sorted(queue.items()) == [(7, 'bar'), (9, 'fiz'), (10, 'foo')]
    assert len(queue) == 3
    assert queue.pop_min() == 'bar'
    assert queue.pop_max() == 'foo'

def test_maxlen_initial_items():
    queue = PriorityQueue([(i, str(i)) for i in range(10)], maxlen=4, mode='max')
    assert len(queue) == 4
    assert sorted(queue) == ['6', '7', '8', '9']

def test_maxlen_logs_drops(caplog):
    queue = PriorityQueue(maxlen=1, mode='min')
    queue.push('foo', 1)
    with caplog.at_level(logging.DEBUG, logger='depq.common.pqueue'):
        queue.push('bar', 2)
        queue.push('baz', 0)
    assert 'dropping' in caplog.text
    assert 'ejected' in caplog.text
    assert list(queue) == ['baz']

def test_many_elements():
    queue = PriorityQueue()
    for i in range(20):
        queue.push(i, priority=i)
    for i in range(20):
        item = queue.pop_min()
        assert item == i, '{} != {}'.format(item, i)

    queue = PriorityQueue()
    for i in range(20):
        queue.push(i, priority=i)
    for i in range(20):
        item = queue.pop_max()
        assert item == 19-i, '{} != {}'.format(item, 19-i)

def test_same_priority():
    queue = PriorityQueue()
    queue.push('first', priority=2)
    for i in range(20):
        queue.push(i, priority=1)
    queue.push('last', priority=0)

    assert queue.pop_max() == 'first'
    assert queue.pop_min() == 'last'
    assert len(queue) == 20

def test_update_priority():
    queue = PriorityQueue()
    queue.push('foo', 1)
    queue.push('bar', 2)
    queue.push('foo', 3)
    assert len(queue) == 2
    assert queue.peek_max() == 'foo'
    assert queue.pop_min() == 'bar'
    assert queue.pop_min() == 'foo'
    assert not queue

def test_remove():
    queue = PriorityQueue([(1, 'a'), (2, 'b'), (3, 'c')])
    queue.remove('a')
    queue.remove('c')
    assert len(queue) == 1
    assert list(queue) == ['b']
    assert queue.peek_min() == queue.peek_max() == 'b'
    with pytest.raises(KeyError):
        queue.remove('a')
    assert queue.pop_max() == 'b'
    with pytest.raises(EmptyHeapError):
        queue.pop_min()

def test_item_ordering():
    assert PQueueItem(1, 'z') < PQueueItem(2, 'a')
    assert PQueueItem(1, 'a') == PQueueItem(1, 'b')
    assert PQueueItem(4, 'x').unwrapped() == (4, 'x')

def test_updates_keep_heap_compact():
    queue = PriorityQueue(maxlen=2)
    for i in range(1000):
        queue.push('a', i % 7)
        assert len(queue.heap) <= 2 * len(queue) + 1
    assert len(queue) == 1
    assert queue.peek_min() == 'a'

    queue = PriorityQueue([(i, i) for i in range(10)])
    for i in range(8):
        queue.remove(i)
    assert len(queue.heap) <= 2 * len(queue)
    assert sorted(queue.items()) == [(8, 8), (9, 9)]
    assert queue.pop_min() == 8
