from datetime import date, timedelta

from judotrack.services.streaks import current_streak, longest_streak

TODAY = date(2024, 5, 15)


def _days(*days_ago):
    return [TODAY - timedelta(days=d) for d in days_ago]


class TestCurrentStreak:
    def test_consecutive_days_ending_today(self):
        assert current_streak(_days(0, 1, 2), TODAY) == 3

    def test_streak_still_alive_if_last_activity_was_yesterday(self):
        assert current_streak(_days(1, 2, 3, 4), TODAY) == 4

    def test_streak_broken_two_days_ago(self):
        assert current_streak(_days(2, 3), TODAY) == 0

    def test_duplicates_count_once(self):
        assert current_streak(_days(0, 0, 1, 1), TODAY) == 2

    def test_gap_stops_the_count(self):
        assert current_streak(_days(0, 1, 3, 4, 5), TODAY) == 2

    def test_future_dates_ignored(self):
        assert current_streak([TODAY + timedelta(days=1)] + _days(0), TODAY) == 1

    def test_empty(self):
        assert current_streak([], TODAY) == 0


class TestLongestStreak:
    def test_longest_in_history(self):
        assert longest_streak(_days(0, 1, 5, 6, 7, 8, 20)) == 4

    def test_single_day(self):
        assert longest_streak(_days(3)) == 1

    def test_empty(self):
        assert longest_streak([]) == 0
