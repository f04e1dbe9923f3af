"""Tests for dailylog.journal.summary."""

from datetime import date

import pytest

from dailylog.core.exceptions import ConfigurationError
from dailylog.journal.summary import (
    WORKWEEK,
    date_range,
    extract_titles,
    parse_weekday,
    parse_weekdays,
    summarize,
)

# 2024-01-15 is a Monday
MONDAY = date(2024, 1, 15)
SUNDAY = date(2024, 1, 21)


class FakeStore:
    """In-memory JournalStore that records every read."""

    def __init__(self, files=None):
        self.files = dict(files or {})
        self.reads = []

    def path_for(self, day):
        return f"/logs/{day}.md"

    def read(self, day):
        self.reads.append(day)
        return self.files.get(day)

    def append(self, day, fragment):
        self.files[day] = self.files.get(day, "") + fragment

    def write_whole(self, day, content):
        self.files[day] = content


class TestParseWeekday:
    @pytest.mark.parametrize(
        "token, expected",
        [("monday", 0), ("Mon", 0), ("TUESDAY", 1), ("wed", 2), ("Thursday", 3), ("fri", 4), ("sat", 5), ("Sun", 6)],
    )
    def test_names_and_abbreviations(self, token, expected):
        assert parse_weekday(token) == expected

    def test_surrounding_whitespace(self):
        assert parse_weekday("  friday ") == 4

    @pytest.mark.parametrize("token", ["funday", "mo", "tues", "", "1"])
    def test_unknown_token_raises(self, token):
        with pytest.raises(ConfigurationError, match="Unrecognized weekday"):
            parse_weekday(token)

    def test_parse_weekdays(self):
        assert parse_weekdays(["mon", "Wednesday", "FRI"]) == frozenset({0, 2, 4})

    def test_parse_weekdays_rejects_any_bad_token(self):
        with pytest.raises(ConfigurationError):
            parse_weekdays(["mon", "someday"])

    def test_workweek(self):
        assert parse_weekdays(["monday", "tuesday", "wednesday", "thursday", "friday"]) == WORKWEEK


class TestExtractTitles:
    def test_formatted_headings(self):
        content = "## 09:05 - First\n\n## 14:30 - Second\n\nbody text\n\n"
        assert extract_titles(content) == ["First", "Second"]

    def test_ignores_non_matching_lines(self):
        content = "# Monday notes\nrandom text\n## no time here\n### 10:00 - too deep\n## 10:00 - Real\n"
        assert extract_titles(content) == ["Real"]

    def test_tolerates_hand_edited_spacing(self):
        content = "  ##  9:15   -   Loose heading  \n"
        assert extract_titles(content) == ["Loose heading"]

    def test_title_with_dash(self):
        assert extract_titles("## 10:00 - Deploy - part 2\n") == ["Deploy - part 2"]

    def test_empty(self):
        assert extract_titles("") == []


class TestDateRange:
    def test_single_day_is_end_date(self):
        assert date_range(SUNDAY, 1) == [SUNDAY]

    def test_chronological(self):
        assert date_range(date(2024, 3, 1), 3) == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]

    @pytest.mark.parametrize("count", [0, -3])
    def test_rejects_non_positive(self, count):
        with pytest.raises(ValueError, match="at least 1"):
            date_range(SUNDAY, count)


class TestSummarize:
    def test_zero_days_rejected(self):
        with pytest.raises(ValueError):
            summarize(FakeStore(), SUNDAY, 0, WORKWEEK)

    def test_one_day_scans_only_end_date(self):
        store = FakeStore()
        stats = summarize(store, MONDAY, 1, WORKWEEK)
        assert store.reads == [MONDAY]
        assert stats.start_date == stats.end_date == MONDAY

    def test_missing_files_are_zero_entries(self):
        store = FakeStore(
            {
                date(2024, 1, 15): "## 09:00 - Standup\n\n",
                date(2024, 1, 17): "## 17:45 - Retro\n\nWent well.\n\n",
            }
        )
        stats = summarize(store, date(2024, 1, 17), 3, WORKWEEK)
        assert stats.total_entries == 2
        assert stats.days_with_entries == 2
        assert stats.expected_days == 3
        assert stats.consistency_percentage == pytest.approx(200 / 3)

    def test_reads_oldest_first_and_reports_chronologically(self):
        store = FakeStore({MONDAY: "## 09:00 - a\n", SUNDAY: "## 09:00 - b\n"})
        stats = summarize(store, SUNDAY, 7, WORKWEEK)
        assert store.reads == date_range(SUNDAY, 7)
        assert [day.date for day in stats.days] == date_range(SUNDAY, 7)
        assert stats.titles_by_day[0] == (MONDAY, ["a"])
        assert stats.titles_by_day[-1] == (SUNDAY, ["b"])

    def test_unexpected_days_count_toward_totals_only(self):
        saturday = date(2024, 1, 20)
        store = FakeStore(
            {
                MONDAY: "## 09:00 - a\n\n## 11:00 - b\n",
                saturday: "## 10:00 - weekend\n",
            }
        )
        stats = summarize(store, SUNDAY, 7, WORKWEEK)
        assert stats.total_entries == 3
        assert stats.days_with_entries == 2
        assert stats.expected_days == 5
        assert stats.expected_days_with_entries == 1
        assert stats.consistency_percentage == pytest.approx(20.0)
        saturday_summary = next(day for day in stats.days if day.date == saturday)
        assert not saturday_summary.expected
        assert saturday_summary.titles == ["weekend"]

    def test_consistency_undefined_when_no_day_expected(self):
        store = FakeStore({SUNDAY: "## 10:00 - rest\n"})
        stats = summarize(store, SUNDAY, 2, WORKWEEK)  # Saturday and Sunday
        assert stats.expected_days == 0
        assert stats.consistency_percentage is None
        assert stats.total_entries == 1

    def test_empty_filter(self):
        stats = summarize(FakeStore(), SUNDAY, 7, frozenset())
        assert stats.expected_days == 0
        assert stats.consistency_percentage is None

    def test_partial_week_counts_days_individually(self):
        # Thursday..Tuesday: Thu, Fri, Mon, Tue are expected
        stats = summarize(FakeStore(), date(2024, 1, 23), 6, WORKWEEK)
        assert stats.expected_days == 4

    def test_file_without_headings_has_preview_but_no_entries(self):
        store = FakeStore({MONDAY: "\n  Scribbled by hand\nmore\n"})
        stats = summarize(store, MONDAY, 1, WORKWEEK)
        assert stats.total_entries == 0
        assert stats.days_with_entries == 0
        assert stats.days[0].preview == "Scribbled by hand"

    def test_accepts_any_iterable_filter(self):
        stats = summarize(FakeStore(), SUNDAY, 7, [0, 1])
        assert stats.expected_days == 2
