"""Default UsernameGenerator: a fixed prefix followed by an increasing integer."""

import itertools
import threading

DEFAULT_PREFIX = 'bennu'


class SequentialUsernameGenerator:
    """Generates usernames of the form ``<prefix><n>`` with n = 0, 1, 2, ...

    The counter is shared by all callers and advances exactly once per call,
    even if the resulting username later turns out to be taken.
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX, start: int = 0):
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)

    def do_generate(self, parameter=None) -> str:
        return f"{self.prefix}{self.next_id()}"

    def __repr__(self) -> str:
        return f"SequentialUsernameGenerator(prefix={self.prefix!r})"
