from core import QueryKey, Task, TaskPage
from core.desktop.devtools.application.query_cache import QueryCache


class ManualClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def _page(*titles):
    return TaskPage(tasks=tuple(Task(id=str(i), title=t) for i, t in enumerate(titles)), total_pages=1)


def test_fresh_within_window_then_stale():
    clock = ManualClock()
    cache = QueryCache(stale_after=30, clock=clock)
    key = QueryKey(1, "")
    cache.store(key, _page("a"))
    clock.now = 29.9
    assert cache.get_fresh(key).tasks[0].title == "a"
    clock.now = 30
    assert cache.get_fresh(key) is None
    assert cache.peek(key) is not None


def test_keys_are_independent():
    cache = QueryCache(clock=ManualClock())
    cache.store(QueryKey(1, ""), _page("a"))
    assert cache.get_fresh(QueryKey(2, "")) is None
    assert cache.get_fresh(QueryKey(1, "milk")) is None


def test_invalidate_all_marks_every_entry():
    cache = QueryCache(clock=ManualClock())
    cache.store(QueryKey(1, ""), _page("a"))
    cache.store(QueryKey(2, "x"), _page("b"))
    cache.invalidate_all()
    cache.invalidate_all()
    assert cache.get_fresh(QueryKey(1, "")) is None
    assert cache.get_fresh(QueryKey(2, "x")) is None
    assert len(cache) == 2
    cache.store(QueryKey(1, ""), _page("c"))
    assert cache.get_fresh(QueryKey(1, "")).tasks[0].title == "c"


def test_clear_drops_entries():
    cache = QueryCache(clock=ManualClock())
    cache.store(QueryKey(1, ""), _page("a"))
    cache.clear()
    assert len(cache) == 0
    assert cache.peek(QueryKey(1, "")) is None
