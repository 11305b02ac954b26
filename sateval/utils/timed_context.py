import contextlib
import time


class _Timer(object):
    def __init__(self, description):
        self.description = description
        self._start = None
        self._end = None

    def start(self):
        self._start = time.perf_counter()

    def stop(self):
        self._end = time.perf_counter()

    @property
    def elapsed(self):
        """ Elapsed time in seconds, up to now if still running. """
        if self._start is None:
            return 0.0
        end = self._end if self._end is not None else time.perf_counter()
        return end - self._start

    def pretty(self, fmt="{description}: {elapsed:e}"):
        return fmt.format(description=self.description, elapsed=self.elapsed)


@contextlib.contextmanager
def timed_context(description):
    """ Time the enclosed block.

    >>> with timed_context("Evaluate") as timer:
    ...     pass
    >>> timer.elapsed >= 0
    True
    """
    timer = _Timer(description)
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
