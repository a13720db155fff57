"""
Conversions between streams and ordinary Python collections, a textual
preview, and chainable wrappers around streams.
"""

from collections.abc import Sequence

from lazyseq.algebra import stream_filter, stream_map, stream_reduce, stream_slice, ref, take
from lazyseq.config import config
from lazyseq.cons import EMPTY, Cons, EmptyStream, stream


def is_stream(x):
    return isinstance(x, (Cons, EmptyStream))


def array_to_stream(items):
    """Stream over the elements of a finite sequence, in order.

    The sequence is copied, so later changes to it do not show in the stream.
    """
    if not isinstance(items, Sequence):
        raise TypeError("expected a sequence, got '{}'".format(type(items).__name__))
    items = tuple(items)

    def from_index(i):
        if i >= len(items):
            return EMPTY
        return stream(items[i], lambda: from_index(i + 1))

    return from_index(0)


def stream_to_array(s):
    """All elements of s as a list. Never returns if s is infinite."""
    return list(s)


def iterable_to_stream(iterable):
    """Stream that pulls from iterable on demand; each item is pulled once."""
    iterator = iter(iterable)

    def pull():
        for item in iterator:
            return stream(item, pull)
        return EMPTY

    return pull()


def show(s, n=None):
    """Preview of the first n elements in the form '< 1 2 3 >'"""
    if n is None:
        n = config.preview_length
    return '< ' + ''.join('{} '.format(item) for item in take(s, n)) + '>'


def _as_stream(source):
    if isinstance(source, Seq):
        return source.stream
    if is_stream(source):
        return source
    if isinstance(source, Sequence):
        return array_to_stream(source)
    raise TypeError("expected a stream or a sequence, got '{}'".format(type(source).__name__))


class Seq:
    """Chainable operations on a stream.

    map, filter, reduce and skip are lazy and return a new Seq. take() and
    to_list() produce lists; to_list() forces every element and so never
    returns for an infinite stream.
    """

    __slots__ = ('_stream',)

    def __init__(self, source):
        self._stream = _as_stream(source)

    @property
    def stream(self):
        return self._stream

    def is_empty(self):
        return self._stream.is_empty()

    def map(self, func, *others):
        return Seq(stream_map(func, self._stream, *[_as_stream(o) for o in others]))

    def filter(self, predicate):
        return Seq(stream_filter(predicate, self._stream))

    def reduce(self, func, acc):
        return Seq(stream_reduce(func, self._stream, acc))

    def skip(self, n):
        return Seq(stream_slice(self._stream, n))

    def ref(self, n):
        return ref(self._stream, n)

    def take(self, n):
        return take(self._stream, n)

    def to_list(self):
        return stream_to_array(self._stream)

    def show(self, n=None):
        return show(self._stream, n)

    def __iter__(self):
        return iter(self._stream)

    def __repr__(self):
        return 'Seq({!r})'.format(self._stream)


class Cursor:
    """Reads a stream in batches.

        cursor = Cursor(integers).take(3)
        cursor.next_batch()  # [0, 1, 2]
        cursor.next_batch()  # [3, 4, 5]
    """

    def __init__(self, s, count=1):
        self._stream = _as_stream(s)
        self.count = count

    @property
    def stream(self):
        return self._stream

    def take(self, n):
        """set the batch size"""
        self.count = n
        return self

    def skip(self, n):
        self._stream = stream_slice(self._stream, n)
        return self

    def next_batch(self):
        batch = take(self._stream, self.count)
        self._stream = stream_slice(self._stream, len(batch))
        return batch

    def __iter__(self):
        if self.count < 1:
            raise ValueError("batch size must be positive to iterate, got {}".format(self.count))
        while not self._stream.is_empty():
            yield self.next_batch()
