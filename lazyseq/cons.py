"""
A stream is either the empty stream or a pair of a head and a suspension.
The suspension produces a stream when forced.
"""

from lazyseq.suspension import Suspension, force


class EmptyStreamError(IndexError):
    """head or tail was taken of the empty stream"""


class Singleton:
    """Class with a single instance"""

    def __new__(cls):
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


class EmptyStream(Singleton):
    """The empty stream"""

    @staticmethod
    def is_empty():
        return True

    @property
    def head(self):
        raise EmptyStreamError("head of the empty stream")

    @property
    def promise(self):
        raise EmptyStreamError("tail of the empty stream")

    def tail(self):
        raise EmptyStreamError("tail of the empty stream")

    @staticmethod
    def __iter__():
        return iter([])

    def __reduce__(self):
        return EmptyStream, ()

    def __repr__(self):
        return '<>'


EMPTY = EmptyStream()


class Cons(tuple):
    """A stream with at least one element.

    The head is already evaluated; the rest of the stream is held by a
    suspension. This container type is immutable.
    """

    def __new__(cls, head, promise):
        if not isinstance(promise, Suspension):
            promise = Suspension(promise)
        return super().__new__(cls, (head, promise))

    @staticmethod
    def is_empty():
        return False

    @property
    def head(self):
        return tuple.__getitem__(self, 0)

    @property
    def promise(self):
        return tuple.__getitem__(self, 1)

    def tail(self):
        return force(self.promise)

    def __iter__(self):
        s = self
        while not s.is_empty():
            yield s.head
            s = s.tail()

    def __contains__(self, item):
        """Never returns for an infinite stream that does not contain item."""
        for element in self:
            if element is item or element == item:
                return True
        return False

    def __len__(self):
        raise TypeError("a stream has no length, use take() or stream_to_array()")

    def _unsupported(self, *args):
        raise TypeError("'{}' object does not support this operation, use the stream algebra"
                        .format(type(self).__name__))

    __getitem__ = _unsupported
    __lt__ = __le__ = __gt__ = __ge__ = _unsupported
    __add__ = __mul__ = __rmul__ = _unsupported
    count = index = _unsupported

    def __bool__(self):
        return True

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    def __hash__(self):
        return id(self)

    def __repr__(self):
        items = []
        seen = set()
        s = self
        while True:
            if id(s) in seen:
                items.append('...')
                break
            seen.add(id(s))
            items.append(repr(s.head))
            if not s.promise.is_forced():
                items.append('...')
                break
            s = s.tail()
            if s.is_empty():
                break
        return '<' + ' '.join(items) + '>'


def stream(head, tail_thunk):
    """build a stream whose tail is computed by calling tail_thunk when first needed"""
    return Cons(head, Suspension(tail_thunk))


def cons(head, rest):
    """build a stream from a head and an already known rest"""
    return Cons(head, Suspension.now(rest))


def is_empty(s):
    return s is EMPTY


def head(s):
    return s.head


def tail(s):
    return s.tail()
