from karek.clock import Clock


def test_str_pads_fields():
    assert str(Clock(1, 2, 3)) == "01:02:03"


def test_tick_increments_seconds():
    clock = Clock(10, 20, 30)
    clock.tick()
    assert (clock.hours, clock.minutes, clock.seconds) == (10, 20, 31)


def test_tick_carries_into_minutes():
    clock = Clock(0, 0, 59)
    clock.tick()
    assert (clock.hours, clock.minutes, clock.seconds) == (0, 1, 0)


def test_tick_wraps_at_midnight():
    clock = Clock(23, 59, 59)
    clock.tick()
    assert str(clock) == "00:00:00"


def test_full_day_returns_to_start():
    clock = Clock(5, 6, 7)
    for _ in range(24 * 60 * 60):
        clock.tick()
    assert clock == Clock(5, 6, 7)