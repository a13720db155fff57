"""
A suspension is a deferred computation that is run at most once.
Forcing a suspension produces its value and caches it.

A producer is either a plain function of no arguments or a generator
function. A generator producer does not force other suspensions itself;
it yields them and is sent their values back:

    def rest():
        following = yield node.promise
        return stream_map(func, following)

The driver below keeps the waiting producers on an explicit stack, so
chains of suspensions that depend on each other are resolved in a loop
instead of by recursion.
"""

import inspect
import logging
from enum import Enum

from lazyseq.config import config

logger = logging.getLogger(__name__)


class ReentrantForceError(RuntimeError):
    """A suspension was forced while its own producer was running."""


class State(Enum):
    PENDING = "pending"
    FORCING = "forcing"
    EVALUATED = "evaluated"


class Suspension:
    __slots__ = ('_producer', '_state', '_value')

    def __init__(self, producer):
        if not callable(producer):
            raise TypeError("'{}' object is not callable".format(type(producer).__name__))
        self._producer = producer
        self._state = State.PENDING
        self._value = None

    @classmethod
    def now(cls, value):
        """A suspension whose value is already known"""
        suspension = cls(lambda: value)
        suspension._settle(value)
        return suspension

    @property
    def state(self):
        return self._state

    def is_forced(self):
        return self._state is State.EVALUATED

    def force(self):
        return force(self)

    def _settle(self, value):
        self._value = value
        self._state = State.EVALUATED
        self._producer = None

    def _start(self):
        self._state = State.FORCING
        return self._producer()

    def _abort(self):
        if self._state is State.FORCING:
            self._state = State.PENDING

    def _is_trampolined(self):
        return inspect.isgeneratorfunction(self._producer)

    def __repr__(self):
        if self._state is State.EVALUATED:
            return 'Suspension(= {!r})'.format(self._value)
        return 'Suspension({})'.format(self._state.value)


def delay(producer):
    return Suspension(producer)


def force(suspension):
    if suspension._state is State.EVALUATED:
        return suspension._value
    if suspension._state is State.FORCING:
        raise ReentrantForceError("suspension forced while its producer is running")
    if suspension._is_trampolined():
        return _drive(suspension, suspension._start())
    try:
        value = suspension._start()
    except BaseException:
        suspension._abort()
        raise
    suspension._settle(value)
    return value


def evaluate(generator):
    """Run a generator producer to completion and return its result.

    Every suspension the generator yields is forced and its value sent back.
    """
    return _drive(None, generator)


def _drive(owner, generator):
    frames = [(owner, generator)]
    value = None
    error = None
    reported_depth = False

    while frames:
        owner, frame = frames[-1]
        try:
            if error is not None:
                thrown, error = error, None
                request = frame.throw(thrown)
            else:
                request = frame.send(value)
        except StopIteration as done:
            frames.pop()
            value = done.value
            if owner is not None:
                owner._settle(value)
            continue
        except BaseException as exc:
            frames.pop()
            if owner is not None:
                owner._abort()
            if not frames:
                raise
            logger.debug("producer failed with %r, passing it to the waiting producer", exc)
            error = exc
            continue

        if not isinstance(request, Suspension):
            error = TypeError("producers may only yield suspensions, got '{}'"
                              .format(type(request).__name__))
            continue

        if request._state is State.EVALUATED:
            value = request._value
            continue

        if request._state is State.FORCING:
            error = ReentrantForceError("suspension forced while its producer is running")
            continue

        try:
            if request._is_trampolined():
                frames.append((request, request._start()))
                value = None
            else:
                value = request._start()
                request._settle(value)
        except BaseException as exc:
            request._abort()
            error = exc
            continue

        if not reported_depth and len(frames) > config.deep_force_threshold:
            reported_depth = True
            logger.debug("forcing chain is %d producers deep", len(frames))

    return value
