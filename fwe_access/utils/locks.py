# =======================================================================================
# fwe_access/utils/locks.py - Per-Ticket Serialization
# =======================================================================================
import threading
from contextlib import contextmanager
from typing import Iterator, List

from .exceptions import CheckInTimeoutError


class TicketLockTable:
    """
    Sharded mutex keyed by ticket id.

    Two scans of the same ticket always land on the same shard, so the
    read-count / decide / insert sequence for a ticket never interleaves
    inside one process. Different tickets may share a shard; that only costs
    a short wait.
    """

    def __init__(self, shards: int = 64, timeout: float = 5.0):
        if shards < 1:
            raise ValueError("shards must be >= 1")
        self._locks: List[threading.Lock] = [threading.Lock() for _ in range(shards)]
        self.timeout = timeout

    def _shard(self, ticket_id: int) -> threading.Lock:
        return self._locks[hash(ticket_id) % len(self._locks)]

    @contextmanager
    def hold(self, ticket_id: int) -> Iterator[None]:
        lock = self._shard(ticket_id)
        if not lock.acquire(timeout=self.timeout):
            raise CheckInTimeoutError(ticket_id, self.timeout)
        try:
            yield
        finally:
            lock.release()
