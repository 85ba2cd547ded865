from datetime import datetime

from plant_attendance.sessions.pairer import pair_sessions


def dt(h, m=0, day=3):
    return datetime(2025, 3, day, h, m)


def test_single_pair_rounds_for_display():
    result = pair_sessions([dt(8, 58)], [dt(17, 2)])

    assert len(result.sessions) == 1
    assert result.sessions[0].hours == 8.07
    assert result.total_hours == 8.07
    assert result.unpaired_entries == 0
    assert result.unpaired_exits == 0


def test_stale_exit_before_entry_is_skipped():
    result = pair_sessions([dt(9)], [dt(8), dt(12)])

    assert [(s.entry, s.exit) for s in result.sessions] == [(dt(9), dt(12))]
    assert result.unpaired_exits == 1


def test_too_short_pair_drops_entry_but_keeps_exit():
    # 09:00 -> 09:03 is under 0.1h and no later entry claims the exit.
    result = pair_sessions([dt(9)], [dt(9, 3)])

    assert result.sessions == ()
    assert result.unpaired_entries == 1
    assert result.unpaired_exits == 1


def test_oversized_pair_is_rejected_and_counted():
    result = pair_sessions([dt(8, day=3)], [dt(9, day=4)])

    assert result.sessions == ()
    assert result.oversized_sessions == 1


def test_sessions_are_valid_and_non_overlapping():
    entries = [dt(6), dt(10), dt(14)]
    exits = [dt(9), dt(13), dt(18)]

    result = pair_sessions(entries, exits)

    assert len(result.sessions) == 3
    for s in result.sessions:
        assert s.exit > s.entry
        assert 0.1 <= s.exact_hours <= 24
    for a, b in zip(result.sessions, result.sessions[1:]):
        assert a.exit <= b.entry


def test_total_uses_unrounded_running_sum():
    # Three sessions of 20 minutes: 0.33 * 3 would display 0.99.
    entries = [dt(8, 0), dt(9, 0), dt(10, 0)]
    exits = [dt(8, 20), dt(9, 20), dt(10, 20)]

    result = pair_sessions(entries, exits)

    assert [s.hours for s in result.sessions] == [0.33, 0.33, 0.33]
    assert result.total_hours == 1.0
