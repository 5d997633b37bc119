"""Tests for TTS text normalization."""

import pytest

from wayfinder.speech.normalizer import (
    normalize_text_for_tts,
    normalize_times,
    number_to_words,
    ordinal_to_words,
    render_year,
)


class TestNumberWords:
    @pytest.mark.parametrize(
        ("num", "words"),
        [(0, "zero"), (7, "seven"), (45, "forty five"), (999, "nine hundred ninety nine")],
    )
    def test_number_to_words(self, num, words):
        assert number_to_words(num) == words

    def test_large_numbers_stay_digits(self):
        assert number_to_words(1000) == "1000"

    def test_ordinals(self):
        assert ordinal_to_words(3) == "third"
        assert ordinal_to_words(21) == "twenty first"
        assert ordinal_to_words(101) == "one hundred first"
        assert ordinal_to_words(1000) is None

    def test_years(self):
        assert render_year("1998") == "nineteen ninety eight"
        assert render_year("1905") == "nineteen oh five"
        assert render_year("2000") == "two thousand"
        assert render_year("2024") == "two thousand twenty four"


class TestNormalizeTextForTTS:
    def test_phone_number(self):
        assert normalize_text_for_tts("Call 9876543210") == (
            "Call nine eight seven six five, four three two one zero"
        )

    def test_time(self):
        assert normalize_text_for_tts("Office opens at 10:30 AM") == "Office opens at ten thirty am"

    def test_year_and_ordinal(self):
        assert normalize_text_for_tts("Founded on 21st May 1998") == (
            "Founded on twenty first May nineteen ninety eight"
        )

    def test_acronyms(self):
        assert normalize_text_for_tts("NAAC grade") == "N A A C grade"
        assert normalize_text_for_tts("Study in the USA") == "Study in the USA"

    def test_custom_pronunciation(self):
        assert normalize_text_for_tts("Welcome to RKSD College") == "Welcome to R K S D College"

    def test_small_numbers_only(self):
        assert normalize_text_for_tts("5 labs and 150 seats") == "five labs and 150 seats"

    def test_url(self):
        assert normalize_text_for_tts("Visit https://www.example.com") == (
            "Visit w w w dot example dot c o m"
        )

    def test_email(self):
        spoken = normalize_text_for_tts("Mail office@college.edu")
        assert spoken.startswith("Mail office at the rate ")
        assert "@" not in spoken

    def test_stable_under_renormalization(self):
        once = normalize_text_for_tts("Call 9876543210 at 10 AM in 2024")
        assert normalize_text_for_tts(once) == once

    def test_numeric_url_has_no_digits(self):
        once = normalize_text_for_tts("Portal http://10.0.0.1 is down")

        assert once == "Portal one zero dot zero dot zero dot one is down"
        assert normalize_text_for_tts(once) == once


class TestNormalizeTimes:
    def test_on_the_hour(self):
        assert normalize_times("5:00 PM") == "five pm"

    def test_with_minutes(self):
        assert normalize_times("Closes at 4:15 pm") == "Closes at four fifteen pm"

    def test_output_is_stable(self):
        once = normalize_text_for_tts("Open 9:00 AM to 5:00 PM")
        assert normalize_text_for_tts(once) == once
