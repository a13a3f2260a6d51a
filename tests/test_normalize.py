"""Unit tests for listing normalization: salary, posting age, highlights, fallbacks."""

from datetime import datetime, timedelta, timezone

import pytest

from hiring_intel.models import UNKNOWN_COMPANY
from hiring_intel.pipeline.normalize import (
    collect_highlights,
    format_posted,
    format_salary,
    normalize_listing,
    resolve_posted_at,
)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _posted(delta: timedelta) -> dict:
    return {"job_posted_at_datetime_utc": (NOW - delta).isoformat()}


class TestFormatSalary:
    def test_range_with_period(self):
        listing = {"job_salary": {"currency": "INR", "salary_min": 800000, "salary_max": 1200000, "salary_period": "YEAR"}}
        assert format_salary(listing) == "₹8,00,000 - ₹12,00,000 / YEAR"

    def test_currency_defaults_to_inr(self):
        assert format_salary({"job_salary": {"salary_min": 50000}}) == "₹50,000"

    def test_fraction_digits_are_dropped(self):
        assert format_salary({"job_salary": {"salary_max": 1500.4}}) == "₹1,500"

    def test_single_value_with_period(self):
        listing = {"job_salary": {"max_salary": 90000, "period": "MONTH"}}
        assert format_salary(listing) == "₹90,000 / MONTH"

    @pytest.mark.parametrize(
        "primary, alternate",
        [
            ({"salary_min": 400000, "salary_max": 600000, "salary_period": "YEAR"},
             {"min_salary": 400000, "max_salary": 600000, "period": "YEAR"}),
            ({"salary_min": 30000}, {"min_salary": 30000}),
            ({"salary_max": 75000, "salary_period": "MONTH"}, {"max_salary": 75000, "period": "MONTH"}),
        ],
    )
    def test_field_name_variants_format_identically(self, primary, alternate):
        assert format_salary({"job_salary": primary}) == format_salary({"job_salary": alternate})

    def test_primary_names_win_over_alternates(self):
        listing = {"job_salary": {"salary_min": 100, "min_salary": 999, "salary_period": "HOUR", "period": "DAY"}}
        assert format_salary(listing) == "₹100 / HOUR"

    def test_other_currency_uses_indian_grouping(self):
        out = format_salary({"job_salary": {"currency": "USD", "salary_min": 120000}})
        assert out is not None
        assert "1,20,000" in out
        assert "₹" not in out

    @pytest.mark.parametrize(
        "salary",
        [None, {}, {"currency": "INR"}, {"salary_min": 0, "salary_max": 0}, {"salary_min": None, "max_salary": None}],
    )
    def test_no_reportable_salary(self, salary):
        assert format_salary({"job_salary": salary}) is None

    def test_non_numeric_amounts_count_as_absent(self):
        assert format_salary({"job_salary": {"salary_min": "n/a"}}) is None

    @pytest.mark.parametrize("salary", ["Competitive", ["800000", "1200000"], 900000])
    def test_non_mapping_salary_is_absent(self, salary):
        assert format_salary({"job_salary": salary}) is None


class TestFormatPosted:
    def test_thirty_minutes_ago(self):
        assert format_posted(_posted(timedelta(minutes=30)), now=NOW) == "Posted less than an hour ago"

    def test_just_under_two_hours_is_still_less_than_an_hour(self):
        # whole hours are floored, and one whole hour still reads "less than an hour"
        assert format_posted(_posted(timedelta(minutes=119)), now=NOW) == "Posted less than an hour ago"

    def test_hours_ago(self):
        assert format_posted(_posted(timedelta(hours=5, minutes=10)), now=NOW) == "Posted 5h ago"

    def test_yesterday(self):
        assert format_posted(_posted(timedelta(days=1, hours=3)), now=NOW) == "Posted yesterday"

    def test_two_days_ago(self):
        assert format_posted(_posted(timedelta(days=2)), now=NOW) == "Posted 2 days ago"

    def test_six_days_ago(self):
        assert format_posted(_posted(timedelta(days=6, hours=23)), now=NOW) == "Posted 6 days ago"

    def test_ten_days_ago_is_a_short_date(self):
        assert format_posted(_posted(timedelta(days=10)), now=NOW) == "Oct 9, 2026"

    def test_naive_iso_is_treated_as_utc(self):
        listing = {"job_posted_at_datetime_utc": "2026-10-19T09:00:00"}
        assert format_posted(listing, now=NOW) == "Posted 3h ago"

    def test_epoch_seconds_fallback(self):
        listing = {"job_posted_at_timestamp": int((NOW - timedelta(days=3)).timestamp())}
        assert format_posted(listing, now=NOW) == "Posted 3 days ago"

    def test_iso_field_takes_precedence(self):
        listing = {
            "job_posted_at_datetime_utc": (NOW - timedelta(days=2)).isoformat(),
            "job_posted_at": (NOW - timedelta(days=4)).isoformat(),
            "job_posted_at_timestamp": int((NOW - timedelta(days=5)).timestamp()),
        }
        assert format_posted(listing, now=NOW) == "Posted 2 days ago"

    def test_unparseable_iso_falls_back_to_epoch(self):
        listing = {
            "job_posted_at_datetime_utc": "not a date",
            "job_posted_at_timestamp": int((NOW - timedelta(days=2)).timestamp()),
        }
        assert format_posted(listing, now=NOW) == "Posted 2 days ago"

    def test_no_timestamp(self):
        assert resolve_posted_at({}) is None
        assert format_posted({}, now=NOW) is None
        assert format_posted({"job_posted_at": "   "}, now=NOW) is None

    @pytest.mark.parametrize("raw", ["Monday", "2", "Oct 2", "October 2026", "3 days ago"])
    def test_partial_generic_dates_are_absent(self, raw):
        assert resolve_posted_at({"job_posted_at": raw}) is None
        assert format_posted({"job_posted_at": raw}, now=NOW) is None

    def test_partial_generic_date_falls_through_to_epoch(self):
        listing = {
            "job_posted_at": "Monday",
            "job_posted_at_timestamp": int((NOW - timedelta(days=4)).timestamp()),
        }
        assert format_posted(listing, now=NOW) == "Posted 4 days ago"

    @pytest.mark.parametrize("raw", ["2026-10-17T12:00:00Z", "17 Oct 2026 12:00", "Oct 17, 2026 12:00 UTC"])
    def test_full_generic_dates_parse(self, raw):
        assert format_posted({"job_posted_at": raw}, now=NOW) == "Posted 2 days ago"

    def test_iso_field_rejects_free_form_text(self):
        assert resolve_posted_at({"job_posted_at_datetime_utc": "Monday"}) is None

    def test_numeric_string_epoch(self):
        listing = {"job_posted_at_timestamp": f" {int((NOW - timedelta(days=3)).timestamp())} "}
        assert format_posted(listing, now=NOW) == "Posted 3 days ago"


class TestCollectHighlights:
    def test_order_and_cap(self):
        listing = {
            "job_highlights": {
                "Benefits": ["b1", "b2"],
                "Responsibilities": ["r1", "r2", "r3"],
                "Qualifications": ["q1", "q2", "q3"],
            }
        }
        assert collect_highlights(listing) == ["q1", "q2", "q3", "r1", "r2", "r3"]

    def test_missing_sections(self):
        assert collect_highlights({"job_highlights": {"Benefits": ["Health cover"]}}) == ["Health cover"]
        assert collect_highlights({}) == []

    @pytest.mark.parametrize("highlights", [["Python", "Django"], "Great team", 42])
    def test_non_mapping_highlights_are_empty(self, highlights):
        assert collect_highlights({"job_highlights": highlights}) == []

    def test_non_string_entries_are_skipped(self):
        listing = {"job_highlights": {"Qualifications": ["SQL", None, {"x": 1}, "Go"]}}
        assert collect_highlights(listing) == ["SQL", "Go"]


class TestNormalizeListing:
    def test_full_listing(self, acme_listing):
        out = normalize_listing(acme_listing, "Fallback")
        assert out["id"] == "acme-1"
        assert out["title"] == "Backend Developer"
        assert out["company"] == "Acme Corp"
        assert (out["city"], out["state"], out["country"]) == ("Bengaluru", "Karnataka", "IN")
        assert out["remote"] is False
        assert out["employmentType"] == "FULLTIME"
        assert out["salary"] == "₹8,00,000 - ₹12,00,000 / YEAR"
        assert out["applyLink"] == "https://acme.com/careers/1"
        assert out["highlights"] == ["3+ years of Python"]
        assert {"label": "HR email", "value": "hr@acme.com"} in out["contacts"]
        assert {"label": "Company website", "value": "https://acme.com"} in out["contacts"]
        assert "companyInsight" not in out

    def test_sparse_listing_uses_fallbacks(self):
        out = normalize_listing({}, "Backend Developer")
        assert out["title"] == "Backend Developer"
        assert out["company"] == UNKNOWN_COMPANY
        assert out["remote"] is False
        assert out["highlights"] == []
        assert out["contacts"] == []
        assert out["id"]
        for key in ("city", "state", "country", "salary", "postedAt", "applyLink", "description", "employmentType"):
            assert key not in out

    def test_blank_fields_fall_back(self):
        out = normalize_listing({"job_id": "  ", "job_title": " ", "employer_name": ""}, "Data Scientist")
        assert out["title"] == "Data Scientist"
        assert out["company"] == UNKNOWN_COMPANY
        assert out["id"].strip()

    def test_generated_ids_are_unique(self):
        ids = {normalize_listing({}, "x")["id"] for _ in range(20)}
        assert len(ids) == 20

    def test_values_are_trimmed(self):
        out = normalize_listing({"employer_name": "  Globex ", "job_city": " Pune "}, "x")
        assert out["company"] == "Globex"
        assert out["city"] == "Pune"

    def test_malformed_nested_fields_do_not_raise(self):
        listing = {
            "job_id": "odd-1",
            "employer_name": "Globex",
            "job_salary": "Competitive",
            "job_highlights": ["Python"],
            "job_posted_at": "Monday",
        }
        out = normalize_listing(listing, "x")
        assert out["id"] == "odd-1"
        assert out["highlights"] == []
        assert "salary" not in out
        assert "postedAt" not in out
