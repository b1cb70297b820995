"""Tests for building and locking a week's roster."""

from cafe_roster.config import RosterConfig
from cafe_roster.directory import RosterDirectory
from cafe_roster.domain.types import Employee, Registration, Slot, WeeklyRoster
from cafe_roster.engine.greedy import GreedyScheduler
from cafe_roster.engine.orchestrator import (
    GENERATED,
    LOCKED,
    UNCHANGED,
    build_week_schedule,
    default_scheduler,
    lock_week,
)
from cafe_roster.services.scoring import RandomTieBreaker, StableTieBreaker


WEEK = "19/10 - 25/10"


def _inputs():
    regs = {
        "Alice": Registration(slots={Slot("Mon", 1), Slot("Mon", 2)}),
        "Bob": Registration(slots={Slot("Mon", 1), Slot("Tue", 3)}),
    }
    directory = RosterDirectory([Employee("E1", "Alice"), Employee("E2", "Bob")])
    return regs, directory


def _scheduler():
    return GreedyScheduler(tie_breaker=StableTieBreaker())


def test_generate_without_lock_writes_nothing(history):
    regs, directory = _inputs()
    outcome = build_week_schedule(regs, directory, history, WEEK, scheduler=_scheduler())

    assert outcome.status == GENERATED
    assert outcome.changed
    assert outcome.roster.cell("Mon", 1) == ["Alice", "Bob"]
    assert history.load() == {}


def test_unlocked_week_can_be_regenerated(history):
    regs, directory = _inputs()
    first = build_week_schedule(regs, directory, history, WEEK, scheduler=_scheduler())
    second = build_week_schedule(regs, directory, history, WEEK, scheduler=_scheduler())
    assert first.status == second.status == GENERATED


def test_generate_and_lock(history):
    regs, directory = _inputs()
    outcome = build_week_schedule(regs, directory, history, WEEK, scheduler=_scheduler(), lock=True)

    assert outcome.status == LOCKED
    assert history.is_locked(WEEK)
    assert history.load()[WEEK] == outcome.roster


def test_locked_week_is_never_regenerated(history):
    regs, directory = _inputs()
    locked = build_week_schedule(regs, directory, history, WEEK, scheduler=_scheduler(), lock=True)

    more_regs = dict(regs, Carol=Registration(slots={Slot("Mon", 1)}))
    for _ in range(2):
        outcome = build_week_schedule(more_regs, directory, history, WEEK, scheduler=_scheduler(), lock=True)
        assert outcome.status == UNCHANGED
        assert not outcome.changed
        assert outcome.roster == locked.roster

    assert list(history.load()) == [WEEK]
    assert history.load()[WEEK] == locked.roster


def test_lock_week_refuses_overwrite(history):
    first = WeeklyRoster.empty()
    first.assign("Sat", 2, ["Alice"])
    assert lock_week(history, WEEK, first).status == LOCKED

    second = WeeklyRoster.empty()
    second.assign("Sat", 2, ["Bob"])
    outcome = lock_week(history, WEEK, second)

    assert outcome.status == UNCHANGED
    assert history.load()[WEEK].cell("Sat", 2) == ["Alice"]


def test_other_weeks_stay_unlocked(history):
    regs, directory = _inputs()
    build_week_schedule(regs, directory, history, WEEK, scheduler=_scheduler(), lock=True)
    outcome = build_week_schedule(regs, directory, history, "26/10 - 01/11", scheduler=_scheduler())
    assert outcome.status == GENERATED


def test_default_scheduler_uses_config():
    cfg = RosterConfig(max_per_shift=3, tie_break_seed=5)
    scheduler = default_scheduler(cfg)
    assert scheduler.max_per_shift == 3
    assert isinstance(scheduler.tie_breaker, RandomTieBreaker)
    assert scheduler.tie_breaker.seed == 5
    assert default_scheduler(cfg, seed=9).tie_breaker.seed == 9
