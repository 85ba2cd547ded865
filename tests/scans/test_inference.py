from datetime import datetime

from plant_attendance.scans.inference import alternate_entry_exit, dedupe_scans, infer_entry_exit, is_active


def test_reads_seconds_apart_keep_only_the_first():
    scans = [datetime(2025, 3, 3, 7, 0, 3), datetime(2025, 3, 3, 7, 0, 0)]

    assert dedupe_scans(scans) == [datetime(2025, 3, 3, 7, 0, 0)]


def test_dedup_compares_against_last_kept_read():
    scans = [
        datetime(2025, 3, 3, 8, 0),
        datetime(2025, 3, 3, 8, 10),
        datetime(2025, 3, 3, 8, 20),
        datetime(2025, 3, 3, 8, 15),
    ]

    # 08:10 is dropped, so 08:15 is measured from 08:00 and kept.
    assert dedupe_scans(scans) == [datetime(2025, 3, 3, 8, 0), datetime(2025, 3, 3, 8, 15)]


def test_dedup_is_idempotent():
    scans = [datetime(2025, 3, 3, h, m) for h, m in [(9, 0), (8, 58), (12, 0), (12, 5), (13, 0), (17, 2)]]

    once = dedupe_scans(scans)

    assert dedupe_scans(once) == once


def test_empty_input_gives_empty_output():
    inferred = infer_entry_exit([])

    assert inferred.deduped == ()
    assert inferred.entries == ()
    assert inferred.exits == ()


def test_alternation_parity():
    for n in range(0, 7):
        scans = [datetime(2025, 3, 3, 6 + i, 0) for i in range(n)]
        entries, exits = alternate_entry_exit(scans)

        assert len(entries) == (n + 1) // 2
        assert len(exits) == n // 2
        assert len(entries) - len(exits) in (0, 1)


def test_odd_number_of_reads_is_still_on_shift():
    inferred = infer_entry_exit([datetime(2025, 3, 3, 8, 0), datetime(2025, 3, 3, 12, 0), datetime(2025, 3, 3, 13, 0)])

    assert inferred.entries == (datetime(2025, 3, 3, 8, 0), datetime(2025, 3, 3, 13, 0))
    assert inferred.exits == (datetime(2025, 3, 3, 12, 0),)
    assert is_active(inferred)
