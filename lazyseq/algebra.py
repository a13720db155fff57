"""
Operations over streams.

Every operation that builds a stream is lazy: it evaluates the first
element right away and suspends the rest. The suspended parts are generator
producers, so walking far into a derived stream runs in a loop rather than
through nested calls.
"""

import functools
import operator

from lazyseq.cons import EMPTY, Cons, cons
from lazyseq.suspension import evaluate


def _check_count(n, what):
    if n < 0:
        raise ValueError("{} must not be negative, got {}".format(what, n))


def _walk(s, n):
    while n > 0 and not s.is_empty():
        s = s.tail()
        n -= 1
    return s


def ref(s, n=0):
    """the n-th element of s, or EMPTY if s has fewer elements"""
    _check_count(n, 'index')
    s = _walk(s, n)
    if s.is_empty():
        return EMPTY
    return s.head


def take(s, n):
    """list of the first n elements of s (fewer if s ends first)"""
    _check_count(n, 'count')
    items = []
    while len(items) < n and not s.is_empty():
        items.append(s.head)
        if len(items) < n:
            s = s.tail()
    return items


def stream_slice(s, start=0):
    """the rest of s from index start on"""
    _check_count(start, 'start')
    return _walk(s, start)


def stream_map(func, *streams):
    """Apply func across the streams elementwise.

    The result ends as soon as any of the streams ends.
    """
    if not streams or any(s.is_empty() for s in streams):
        return EMPTY

    def rest():
        tails = []
        for s in streams:
            tails.append((yield s.promise))
        return stream_map(func, *tails)

    return Cons(func(*[s.head for s in streams]), rest)


def seek(predicate, s):
    """Generator producer for the rest of s from its first element that
    satisfies predicate. Run it with evaluate() or delegate to it with
    `yield from` inside another producer.
    """
    while not s.is_empty():
        if predicate(s.head):
            return _filtered(predicate, s)
        s = yield s.promise
    return EMPTY


def _filtered(predicate, s):
    def rest():
        following = yield s.promise
        return (yield from seek(predicate, following))

    return Cons(s.head, rest)


def stream_filter(predicate, s):
    """the elements of s that satisfy predicate"""
    return evaluate(seek(predicate, s))


def stream_reduce(func, s, acc):
    """Stream of the running accumulator of a fold over s.

    The first element is acc itself, followed by func(acc, s[0]), and so on.
    A finite s of n elements gives n + 1 states, the last being the fold.
    """
    if s.is_empty():
        return EMPTY

    def rest():
        following = yield s.promise
        updated = func(acc, s.head)
        if following.is_empty():
            return cons(updated, EMPTY)
        return stream_reduce(func, following, updated)

    return Cons(acc, rest)


def scale(s, factor):
    return stream_map(lambda x: x * factor, s)


def _sum(*args):
    return functools.reduce(operator.add, args, 0)


def _product(*args):
    return functools.reduce(operator.mul, args, 1)


def add_streams(*streams):
    return stream_map(_sum, *streams)


def mul_streams(*streams):
    return stream_map(_product, *streams)


def merge(s1, s2):
    """Merge two ascending streams into one.

    An element present in both streams appears once in the result.
    """
    if s1.is_empty():
        return s2
    if s2.is_empty():
        return s1

    h1 = s1.head
    h2 = s2.head

    if h2 < h1:
        def rest():
            return merge(s1, (yield s2.promise))
        return Cons(h2, rest)

    if h1 < h2:
        def rest():
            return merge((yield s1.promise), s2)
        return Cons(h1, rest)

    def rest():
        t1 = yield s1.promise
        t2 = yield s2.promise
        return merge(t1, t2)
    return Cons(h1, rest)
