"""
Infinite sequences defined as streams.

Most of these refer to themselves: the tail of the stream is computed from
the stream being defined. `recursive` hands each definition a forward
reference to its own result.
"""

import operator

from lazyseq.algebra import add_streams, mul_streams, seek, stream_reduce
from lazyseq.cons import EMPTY, Cons, stream
from lazyseq.forward import recursive


def integers_from(n):
    """n, n + 1, n + 2, ..."""
    return stream(n, lambda: integers_from(n + 1))


def sieve(s):
    """Keep the head of s and remove its multiples from the rest, repeatedly.

    This is trial division: every candidate is tested against all primes
    found before it.
    """
    if s.is_empty():
        return EMPTY
    prime = s.head

    def rest():
        following = yield s.promise
        candidates = yield from seek(lambda n: n % prime != 0, following)
        return sieve(candidates)

    return Cons(prime, rest)


integers = integers_from(0)

ones = recursive(lambda ones: stream(1, ones))

ints = recursive(lambda ints: stream(0, lambda: add_streams(ones, ints())))

fact = stream_reduce(operator.mul, integers_from(1), 1)

factorial = recursive(lambda factorial: stream(1, lambda: mul_streams(ints.tail(), factorial())))

fibs = recursive(lambda fibs: stream(0, lambda: stream(1, lambda: add_streams(fibs(), fibs().tail()))))

primes = sieve(integers_from(2))
