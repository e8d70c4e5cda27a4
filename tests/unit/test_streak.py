"""Unit tests for streak evaluation."""
import pytest

from learning.ledger import record_activity
from learning.models import ActivityDay, LearnerProgress
from learning.streak import derive_streak, effective_streak, recompute_streak


def _record(p, d, xp=10):
    update = record_activity(p, d, xp)
    if update.previous_active_day != d:
        recompute_streak(p, d, update.previous_active_day)
    return p.current_streak


@pytest.mark.unit
class TestRecomputeStreak:
    def test_first_ever_activity_starts_at_one(self, day):
        p = LearnerProgress.empty("s1")
        assert _record(p, day(1)) == 1

    def test_consecutive_days_increment(self, day):
        p = LearnerProgress.empty("s1")
        assert _record(p, day(1)) == 1
        assert _record(p, day(2)) == 2
        assert _record(p, day(3)) == 3

    def test_missed_day_resets_to_one(self, day):
        p = LearnerProgress.empty("s1")
        assert _record(p, day(1)) == 1
        assert _record(p, day(3)) == 1

    def test_same_day_does_not_double_increment(self, day):
        p = LearnerProgress.empty("s1")
        _record(p, day(1))
        _record(p, day(2))
        _record(p, day(2))
        _record(p, day(2))
        assert p.current_streak == 2

    def test_same_day_transition_is_a_noop(self, day):
        p = LearnerProgress(learner_id="s1", current_streak=4, history=[ActivityDay(day(1), 10)])
        assert recompute_streak(p, day(1), day(1)) == 4

    def test_stored_streak_matches_history_run(self, day):
        p = LearnerProgress.empty("s1")
        for n in (1, 2, 4, 5, 6):
            _record(p, day(n))
        assert p.current_streak == derive_streak(p.history) == 3


@pytest.mark.unit
class TestEffectiveStreak:
    def test_no_history_is_zero(self, day):
        assert effective_streak(LearnerProgress.empty("s1"), day(1)) == 0

    def test_alive_today_and_yesterday(self, day):
        p = LearnerProgress(learner_id="s1", current_streak=3, history=[ActivityDay(day(3), 10)])
        assert effective_streak(p, day(3)) == 3
        assert effective_streak(p, day(4)) == 3

    def test_broken_after_a_missed_day(self, day):
        p = LearnerProgress(learner_id="s1", current_streak=3, history=[ActivityDay(day(3), 10)])
        assert effective_streak(p, day(5)) == 0


@pytest.mark.unit
class TestDeriveStreak:
    def test_ignores_zero_xp_days(self, day):
        history = [ActivityDay(day(1), 10), ActivityDay(day(2), 0), ActivityDay(day(3), 5)]
        assert derive_streak(history) == 1

    def test_empty(self):
        assert derive_streak([]) == 0
