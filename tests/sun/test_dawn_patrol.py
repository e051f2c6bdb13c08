# ABOUTME: Tests for the dawn patrol status state machine
# ABOUTME: Walks a fixed morning through every status transition

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from surf_almanac.sun.calculator import SunTimes
from surf_almanac.sun.dawn_patrol import STATE_ORDER, get_dawn_patrol_status

LA = ZoneInfo("America/Los_Angeles")


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 10, 13, hour, minute, tzinfo=LA)


SUN = SunTimes(
    first_light=at(6, 0),
    sunrise=at(6, 30),
    sunset=at(19, 0),
    last_light=at(19, 30),
)


class TestWithDriveTime:
    """30 minute drive plus 10 minute buffer: leave by 5:20"""

    def status(self, now: datetime):
        return get_dawn_patrol_status(now, SUN, drive_minutes=30, buffer_minutes=10)

    def test_too_early(self):
        result = self.status(at(4, 0))
        assert result.status == "too-early"
        assert result.message == "Leave by 5:20 AM for first light"
        assert result.leave_by == at(5, 20)

    def test_leave_now(self):
        result = self.status(at(5, 0))
        assert result.status == "leave-now"
        assert result.message == "Leave in 20 min for dawn patrol!"

    def test_leave_now_starts_thirty_minutes_before(self):
        assert self.status(at(4, 49)).status == "too-early"
        result = self.status(at(4, 50))
        assert result.status == "leave-now"
        assert result.message == "Leave in 30 min for dawn patrol!"

    def test_on_the_way(self):
        for now in (at(5, 20), at(5, 30), at(5, 59)):
            result = self.status(now)
            assert result.status == "on-the-way"
            assert result.message == "Go now to catch first light!"

    def test_surfing(self):
        for now in (at(6, 0), at(7, 0), at(18, 59)):
            result = self.status(now)
            assert result.status == "surfing"
            assert result.message == "Sun up until 7:00 PM"

    def test_missed_after_sunset(self):
        result = self.status(at(19, 0))
        assert result.status == "missed"
        assert result.message == "Sun has set"

    def test_states_only_move_forward(self):
        """Sweeping through the day visits each state once, in order"""
        seen = []
        now = at(0, 0)
        while now < at(23, 55):
            state = self.status(now).status
            if not seen or seen[-1] != state:
                seen.append(state)
            now += timedelta(minutes=5)

        assert tuple(seen) == STATE_ORDER

    def test_zero_buffer(self):
        result = get_dawn_patrol_status(at(4, 0), SUN, drive_minutes=30, buffer_minutes=0)
        assert result.leave_by == at(5, 30)

    def test_default_buffer_from_config(self):
        result = get_dawn_patrol_status(at(4, 0), SUN, drive_minutes=30)
        assert result.leave_by == at(5, 20)


class TestWithoutDriveTime:
    """No drive estimate: only first light and sunrise matter"""

    def test_before_first_light(self):
        result = get_dawn_patrol_status(at(5, 0), SUN)
        assert result.status == "too-early"
        assert result.message == "First light at 6:00 AM"
        assert result.leave_by is None

    def test_between_first_light_and_sunrise(self):
        result = get_dawn_patrol_status(at(6, 15), SUN)
        assert result.status == "surfing"
        assert result.message == "Sunrise at 6:30 AM"

    def test_after_sunrise(self):
        result = get_dawn_patrol_status(at(8, 0), SUN, drive_minutes=0)
        assert result.status == "surfing"
        assert result.message == "Sun is up until 7:00 PM"

    def test_after_sunset(self):
        assert get_dawn_patrol_status(at(20, 0), SUN).status == "missed"
