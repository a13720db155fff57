"""
Forward references for streams that are defined in terms of themselves.

A Forward is allocated before the stream it names and bound once the
stream is built. Tail thunks capture the handle and only call it when
forced, by which time it is bound:

    ints = recursive(lambda me: stream(0, lambda: add_streams(ones, me())))
"""


class UnboundForwardError(RuntimeError):
    pass


class AlreadyBoundError(RuntimeError):
    pass


_UNBOUND = object()


class Forward:
    """Write-once handle to a stream that is still being defined"""

    __slots__ = ('_target', 'name')

    def __init__(self, name=None):
        self._target = _UNBOUND
        self.name = name

    def is_bound(self):
        return self._target is not _UNBOUND

    def bind(self, target):
        if self.is_bound():
            raise AlreadyBoundError("forward reference {} is already bound".format(self._label()))
        self._target = target
        return target

    def get(self):
        if not self.is_bound():
            raise UnboundForwardError("forward reference {} used before it was bound".format(self._label()))
        return self._target

    __call__ = get

    def _label(self):
        return repr(self.name) if self.name is not None else hex(id(self))

    def __repr__(self):
        state = 'bound' if self.is_bound() else 'unbound'
        return 'Forward({}, {})'.format(self._label(), state)


def recursive(build):
    """Build a stream that refers to itself.

    `build` receives a handle to the stream it returns.
    """
    handle = Forward(getattr(build, '__name__', None))
    return handle.bind(build(handle))
