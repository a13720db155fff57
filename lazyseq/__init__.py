"""
Lazy, memoized streams in the style of SICP chapter 3.5.
"""

from lazyseq.suspension import Suspension, ReentrantForceError, delay, force, evaluate
from lazyseq.cons import EMPTY, Cons, EmptyStream, EmptyStreamError, stream, cons, head, tail, is_empty
from lazyseq.forward import Forward, recursive, UnboundForwardError, AlreadyBoundError
from lazyseq.algebra import (ref, take, stream_slice, stream_map, stream_filter, stream_reduce,
                             scale, add_streams, mul_streams, merge, seek)
from lazyseq.sequences import integers_from, integers, ones, ints, fact, factorial, fibs, sieve, primes
from lazyseq.bridge import array_to_stream, stream_to_array, iterable_to_stream, show, Seq, Cursor
from lazyseq.config import StreamConfig, config

__version__ = "0.1.0"
