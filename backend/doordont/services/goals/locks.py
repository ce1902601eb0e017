"""
Per-goal lock registry
Serializes counter mutations (user increments, resets, scheduled evaluations)
for the same goal ID while leaving different goals independent
"""
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List


class GoalLocks:
    """
    Hands out one lock per goal ID

    Entries are reference counted and dropped once no thread holds or waits
    on them, so the registry only ever contains goals currently in use.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[int, threading.Lock] = {}
        self._holders: Dict[int, int] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def active_goal_ids(self) -> List[int]:
        with self._guard:
            return sorted(self._locks)

    @contextmanager
    def hold(self, goal_id: int) -> Iterator[None]:
        with self._guard:
            lock = self._locks.get(goal_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[goal_id] = lock
            self._holders[goal_id] = self._holders.get(goal_id, 0) + 1

        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._holders[goal_id] -= 1
                if self._holders[goal_id] == 0:
                    del self._holders[goal_id]
                    del self._locks[goal_id]
