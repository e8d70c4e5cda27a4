"""Unit tests for the progress service boundary (in-memory store, fake clock)."""
import logging
import threading

import pytest

from learning.errors import AlreadyCompleted, InvalidAmount, NotFound
from learning.locks import KeyedLock
from learning.store import InMemoryProgressStore


@pytest.mark.unit
class TestSubmitActivity:
    def test_creates_record_lazily(self, progress_service, memory_store):
        assert "s1" not in memory_store
        result = progress_service.submit_activity("s1", 20, "tech-101")
        assert result == {"xp": 20, "streak": 1, "completed_modules": ["tech-101"]}
        assert "s1" in memory_store

    def test_same_day_sums_into_one_entry(self, progress_service, memory_store):
        for xp in (5, 10, 15):
            progress_service.submit_activity("s1", xp)
        p = memory_store.load_progress("s1")
        assert len(p.history) == 1
        assert p.history[0].xp_earned == 30
        assert p.total_xp == sum(e.xp_earned for e in p.history) == 30
        assert p.current_streak == 1

    def test_duplicate_module_rejected(self, progress_service, memory_store):
        progress_service.submit_activity("s1", 20, "tech-101")
        with pytest.raises(AlreadyCompleted):
            progress_service.submit_activity("s1", 20, "tech-101")
        assert memory_store.load_progress("s1").total_xp == 20

    def test_unknown_module_rejected_before_write(self, progress_service, memory_store, catalog):
        known = {m.module_id for m in catalog}
        with pytest.raises(NotFound):
            progress_service.submit_activity("s1", 999, "does-not-exist", known)
        assert "s1" not in memory_store

        progress_service.submit_activity("s1", 20, "tech-101", known)
        with pytest.raises(NotFound):
            progress_service.submit_activity("s1", 999, "does-not-exist", known)
        p = memory_store.load_progress("s1")
        assert p.total_xp == 20
        assert p.completed_modules == ["tech-101"]
        assert progress_service.get_summary("s1", len(catalog)).completion_ratio <= 1.0

    def test_activity_log_reports_ledger_change(self, progress_service):
        records = []

        class _Collect(logging.Handler):
            def emit(self, record):
                records.append(record.getMessage())

        handler = _Collect(level=logging.INFO)
        log = logging.getLogger("portal.learning")
        old_level = log.level
        log.addHandler(handler)
        log.setLevel(logging.INFO)
        try:
            progress_service.submit_activity("s1", 20, "tech-101")
            progress_service.submit_activity("s1", 5)
        finally:
            log.removeHandler(handler)
            log.setLevel(old_level)

        recorded = [m for m in records if m.startswith("activity recorded")]
        assert "new_day=True xp_added=20 module_added=tech-101" in recorded[0]
        assert "new_day=False xp_added=5 module_added=None" in recorded[1]

    def test_catalog_check_is_opt_in(self, progress_service):
        assert progress_service.submit_activity("s1", 5, "free-form")["completed_modules"] == ["free-form"]

    def test_invalid_amount_does_not_create_record(self, progress_service, memory_store):
        with pytest.raises(InvalidAmount):
            progress_service.submit_activity("s1", 0)
        assert "s1" not in memory_store

    def test_streak_resets_after_gap(self, progress_service, fake_now):
        assert progress_service.submit_activity("s1", 10)["streak"] == 1
        fake_now.advance(days=2)
        assert progress_service.submit_activity("s1", 10)["streak"] == 1

    def test_streak_grows_on_consecutive_days(self, progress_service, fake_now):
        streaks = []
        for _ in range(3):
            streaks.append(progress_service.submit_activity("s1", 10)["streak"])
            fake_now.advance(days=1)
        assert streaks == [1, 2, 3]

    def test_learners_are_independent(self, progress_service):
        progress_service.submit_activity("s1", 10, "a")
        progress_service.submit_activity("s2", 30, "a")
        assert progress_service.load_or_empty("s1").total_xp == 10
        assert progress_service.load_or_empty("s2").total_xp == 30


@pytest.mark.unit
class TestReads:
    def test_summary_for_unknown_learner_is_zeroed(self, progress_service):
        s = progress_service.get_summary("nobody", 10)
        assert (s.xp, s.streak, s.completed_count) == (0, 0, 0)
        assert [p.xp for p in s.weekly_series] == [0] * 7

    def test_summary_is_stable_without_writes(self, progress_service):
        progress_service.submit_activity("s1", 20, "tech-101")
        first = progress_service.get_summary("s1", 10)
        second = progress_service.get_summary("s1", 10)
        assert first == second
        assert hash(first) == hash(second)
        assert first.xp == 20 and first.completion_ratio == pytest.approx(0.1)

    def test_summaries_differ_after_a_write(self, progress_service):
        progress_service.submit_activity("s1", 20)
        before = progress_service.get_summary("s1", 10)
        progress_service.submit_activity("s1", 5)
        assert progress_service.get_summary("s1", 10) != before

    def test_summary_streak_expires_when_broken(self, progress_service, fake_now):
        progress_service.submit_activity("s1", 10)
        fake_now.advance(days=3)
        assert progress_service.get_summary("s1", 10).streak == 0

    def test_require_progress(self, progress_service):
        with pytest.raises(NotFound):
            progress_service.require_progress("nobody")
        progress_service.submit_activity("s1", 5)
        assert progress_service.require_progress("s1").total_xp == 5

    def test_recommendations_skip_completed(self, progress_service, catalog):
        progress_service.submit_activity("s1", 20, "tech-101")
        out = progress_service.get_recommendations("s1", catalog, ["Technology"])
        assert [m.module_id for m in out] == ["tech-102", "tech-103"]


@pytest.mark.unit
class TestConcurrency:
    def test_parallel_submissions_do_not_lose_updates(self, clock):
        from learning.service import ProgressService

        store = InMemoryProgressStore()
        service = ProgressService(store, clock)
        errors = []

        def worker(n):
            try:
                service.submit_activity("s1", 1, f"mod-{n}")
            except Exception as e:  # pragma: no cover - surfaced by the assert below
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(40)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        p = store.load_progress("s1")
        assert p.total_xp == 40
        assert len(p.completed_modules) == 40
        assert len(p.history) == 1 and p.history[0].xp_earned == 40

    def test_same_module_retries_complete_once(self, clock):
        from learning.service import ProgressService

        service = ProgressService(InMemoryProgressStore(), clock)
        outcomes = []
        lock = threading.Lock()

        def worker():
            try:
                service.submit_activity("s1", 20, "tech-101")
                result = "ok"
            except AlreadyCompleted:
                result = "dup"
            with lock:
                outcomes.append(result)

        threads = [threading.Thread(target=worker) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(outcomes) == ["dup"] * 9 + ["ok"]
        assert service.load_or_empty("s1").total_xp == 20


@pytest.mark.unit
class TestKeyedLock:
    def test_one_lock_per_key(self):
        locks = KeyedLock()
        with locks.hold("a"):
            with locks.hold("b"):
                assert len(locks) == 2
        assert len(locks) == 0

    def test_other_keys_not_blocked(self):
        locks = KeyedLock()
        acquired = threading.Event()

        def other():
            with locks.hold("b"):
                acquired.set()

        with locks.hold("a"):
            t = threading.Thread(target=other)
            t.start()
            assert acquired.wait(timeout=2)
            t.join()

    def test_stores_share_an_empty_registry(self):
        locks = KeyedLock()
        a = InMemoryProgressStore(locks)
        b = InMemoryProgressStore(locks)
        assert a.locks is locks and b.locks is locks

    def test_entry_survives_while_a_waiter_is_queued(self):
        locks = KeyedLock()
        entered = threading.Event()

        def waiter():
            with locks.hold("a"):
                entered.set()

        with locks.hold("a"):
            t = threading.Thread(target=waiter)
            t.start()
            assert not entered.wait(timeout=0.1)
            assert len(locks) == 1
        t.join(timeout=2)
        assert entered.is_set()
        assert len(locks) == 0

    def test_registry_empties_after_parallel_submissions(self, clock):
        from learning.service import ProgressService

        store = InMemoryProgressStore()
        service = ProgressService(store, clock)
        threads = [threading.Thread(target=service.submit_activity, args=(f"s{i % 5}", 1)) for i in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(store.locks) == 0
        assert sum(store.load_progress(f"s{i}").total_xp for i in range(5)) == 20
