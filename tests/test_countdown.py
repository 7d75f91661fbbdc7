from timed_quiz.constants.quiz_constants import TICK_INTERVAL_MS
from timed_quiz.core.services.countdown import CountdownTimer


def _timer(scheduler):
    ticks = []
    timer = CountdownTimer(scheduler, on_tick=lambda: ticks.append(1))
    return timer, ticks


def test_start_schedules_a_one_second_period(scheduler):
    timer, ticks = _timer(scheduler)

    timer.start()
    scheduler.fire(3)

    assert timer.is_running()
    assert scheduler.interval_ms == TICK_INTERVAL_MS == 1000
    assert len(ticks) == 3


def test_start_and_stop_are_idempotent(scheduler):
    timer, _ = _timer(scheduler)

    timer.start()
    timer.start()
    timer.stop()
    timer.stop()

    assert scheduler.start_count == 1
    assert scheduler.stop_count == 1


def test_no_ticks_after_stop(scheduler):
    timer, ticks = _timer(scheduler)
    timer.start()
    callback = scheduler._callback

    timer.stop()
    scheduler.fire(5)
    callback()  # a period that was already queued by the host

    assert ticks == []


def test_restart_does_not_replay_missed_ticks(scheduler):
    timer, ticks = _timer(scheduler)
    timer.start()
    scheduler.fire()
    timer.stop()

    timer.start()
    scheduler.fire()

    assert len(ticks) == 2
