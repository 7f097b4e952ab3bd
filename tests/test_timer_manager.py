import time

from ktg.timer_manager import ManagedTimer, TimerManager


def test_now_tracks_system_clock_in_milliseconds():
    assert abs(ManagedTimer.now() - time.time() * 1000) < 1000


def test_on_timer_without_callback_does_nothing():
    timer = ManagedTimer()
    before = timer.time
    timer.on_timer()
    assert timer.time == before
    assert timer.repeat == -1


def test_on_timer_calls_and_advances():
    calls = []
    timer = ManagedTimer(3)
    timer.callback(250, calls.append, "x")
    before = timer.time
    timer.on_timer()
    assert calls == ["x"]
    assert timer.time == before + 250
    assert timer.repeat == 2


def test_on_timer_with_zero_repeat_is_inert():
    calls = []
    timer = ManagedTimer(0)
    timer.callback(10, calls.append, 1)
    timer.on_timer()
    assert calls == []


def test_infinite_timer_keeps_negative_repeat():
    timer = ManagedTimer()
    timer.callback(10, lambda: None)
    timer.on_timer()
    timer.on_timer()
    assert timer.repeat == -1


def test_update_on_empty_manager():
    manager = TimerManager()
    manager.update()
    assert len(manager) == 0


def test_first_update_fires_then_waits_for_period():
    calls = []
    manager = TimerManager()
    manager.schedule(10_000, calls.append, 1)
    manager.update()
    manager.update()
    assert calls == [1]
    assert len(manager) == 1


def test_fires_again_after_period():
    calls = []
    manager = TimerManager()
    manager.schedule(20, calls.append, "a")
    manager.update()
    time.sleep(0.05)
    manager.update()
    assert len(calls) >= 2


def test_catches_up_within_one_update():
    calls = []
    manager = TimerManager()
    manager.schedule(10, lambda: calls.append(1))
    time.sleep(0.055)
    manager.update()
    assert len(calls) >= 5


def test_limited_timer_is_removed_when_spent():
    calls = []
    manager = TimerManager()
    manager.schedule(10, calls.append, 7, repeat=2)
    manager.update()
    time.sleep(0.03)
    manager.update()
    assert calls == [7, 7]
    assert len(manager) == 0
    time.sleep(0.03)
    manager.update()
    assert calls == [7, 7]


def test_zero_repeat_timer_is_dropped_without_firing():
    calls = []
    manager = TimerManager()
    manager.schedule(10, calls.append, 1, repeat=0)
    manager.update()
    assert calls == []
    assert len(manager) == 0


def test_timers_fire_in_schedule_order():
    order = []
    manager = TimerManager()
    manager.schedule(1000, order.append, "first")
    manager.schedule(1500, order.append, "second")
    manager.update()
    assert order == ["first", "second"]
    assert len(manager) == 2


def test_schedule_returns_configured_timer():
    manager = TimerManager()
    timer = manager.schedule(1500, lambda value: None, 1, repeat=4)
    assert timer.period == 1500
    assert timer.repeat == 4