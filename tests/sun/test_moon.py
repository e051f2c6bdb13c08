# ABOUTME: Tests for moon phase lookup
# ABOUTME: Anchored on the reference new moon of January 2024

from datetime import datetime, timedelta, timezone

from surf_almanac.sun.moon import (
    KNOWN_NEW_MOON,
    SYNODIC_MONTH_DAYS,
    get_month_moon_phases,
    get_moon_phase,
    is_significant_phase,
)


def test_reference_instant_is_new_moon():
    info = get_moon_phase(KNOWN_NEW_MOON)
    assert info.phase == "new"
    assert info.illumination == 0
    assert info.name == "New Moon"


def test_half_a_cycle_later_is_full():
    moment = KNOWN_NEW_MOON + timedelta(days=SYNODIC_MONTH_DAYS / 2 + 1)
    info = get_moon_phase(moment)
    assert info.phase == "full"
    assert info.illumination >= 98
    assert info.emoji == "🌕"


def test_one_cycle_later_is_new_again():
    moment = KNOWN_NEW_MOON + timedelta(days=SYNODIC_MONTH_DAYS + 0.5)
    assert get_moon_phase(moment).phase == "new"


def test_naive_datetime_treated_as_utc():
    naive = datetime(2024, 3, 1, 12, 0)
    aware = naive.replace(tzinfo=timezone.utc)
    assert get_moon_phase(naive) == get_moon_phase(aware)


def test_month_phases_cover_each_day():
    phases = get_month_moon_phases(2024, 2)
    assert sorted(phases) == list(range(1, 30))
    assert all(0 <= info.illumination <= 100 for info in phases.values())


def test_significant_phases():
    assert is_significant_phase("full")
    assert is_significant_phase("new")
    assert is_significant_phase("first-quarter")
    assert not is_significant_phase("waxing-gibbous")
