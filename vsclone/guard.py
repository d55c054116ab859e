"""
Per-name guard against concurrent clones of the same target
"""

import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, Set

from .exceptions import CloneInProgressError


class InFlightRegistry:
    """
    Names of VMs currently being cloned

    A name is claimed for the duration of a clone call. A non-blocking clone
    returns while its task is still running, so the caller can also hold the
    name past the call until the task reports it is done.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._names: Set[str] = set()
        self._held: Dict[str, Callable[[], bool]] = {}

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._names or self._still_held(name)

    def _still_held(self, name: str) -> bool:
        is_done = self._held.get(name)
        if is_done is None:
            return False
        if is_done():
            del self._held[name]
            return False
        return True

    @contextmanager
    def claim(self, name: str) -> Iterator[str]:
        """Hold name for the duration of the block"""
        with self._lock:
            if name in self._names or self._still_held(name):
                raise CloneInProgressError(
                    f"A clone named '{name}' is already in progress",
                    code="clone_in_progress",
                    details={'name': name},
                )
            self._names.add(name)
        try:
            yield name
        finally:
            with self._lock:
                self._names.discard(name)

    def hold_until(self, name: str, is_done: Callable[[], bool]) -> None:
        """Keep name claimed after the current block until is_done() is true"""
        with self._lock:
            self._held[name] = is_done
