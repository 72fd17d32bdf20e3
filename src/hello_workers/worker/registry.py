import threading


class WorkerRegistry:
    """
    Ordered, append-only record of every worker id seen since startup.

    FastAPI runs sync endpoints on a threadpool, so all access goes
    through the lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._seen_ids: list[int] = []

    def add(self, worker_id: int) -> None:
        with self._lock:
            self._seen_ids.append(worker_id)

    def snapshot(self) -> list[int]:
        with self._lock:
            return list(self._seen_ids)

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen_ids)
