from concurrent.futures import ThreadPoolExecutor

from hello_workers.worker.registry import WorkerRegistry


def test_starts_empty():
    registry = WorkerRegistry()
    assert registry.snapshot() == []
    assert len(registry) == 0


def test_keeps_order_and_duplicates():
    registry = WorkerRegistry()
    for worker_id in [3, 1, 3, 2]:
        registry.add(worker_id)
    assert registry.snapshot() == [3, 1, 3, 2]


def test_snapshot_is_a_copy():
    registry = WorkerRegistry()
    registry.add(1)
    snap = registry.snapshot()
    snap.append(99)
    assert registry.snapshot() == [1]


def test_concurrent_adds_lose_nothing():
    registry = WorkerRegistry()
    n_threads, per_thread = 8, 500

    def add_many(offset):
        for i in range(per_thread):
            registry.add(offset * per_thread + i)

    with ThreadPoolExecutor(max_workers=n_threads) as pool:
        list(pool.map(add_many, range(n_threads)))

    seen = registry.snapshot()
    assert len(seen) == n_threads * per_thread
    assert sorted(seen) == list(range(n_threads * per_thread))
    # each thread's own adds stay in program order
    for offset in range(n_threads):
        mine = [x for x in seen if x // per_thread == offset]
        assert mine == sorted(mine)
