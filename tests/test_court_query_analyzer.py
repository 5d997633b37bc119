"""Tests for court query analysis."""

from wayfinder.core.court_query_analyzer import (
    analyze_court_query,
    extract_image_search_keywords,
    extract_room_number,
    get_court_data_fetch_strategy,
)


class TestExtractRoomNumber:
    def test_english(self):
        assert extract_room_number("Where is room number 5?") == "5"
        assert extract_room_number("room no. 12") == "12"

    def test_devanagari(self):
        assert extract_room_number("कमरा 12 कहां है") == "12"

    def test_none(self):
        assert extract_room_number("where is the canteen") is None


class TestAnalyzeCourtQuery:
    def test_greeting(self):
        analysis = analyze_court_query("Namaste")

        assert analysis.topics.greeting is True
        assert analysis.entity_mentions == {}

    def test_room_number_is_an_entity(self):
        analysis = analyze_court_query("Where is room number 5?")

        assert analysis.entity_mentions == {"room_number": "5"}
        assert analysis.topics.courtrooms is True
        assert analysis.topics.directions is True
        assert analysis.needs_detailed_info is True

    def test_image_request(self):
        analysis = analyze_court_query("Show me a photo of the registry")
        assert analysis.topics.building_images is True

    def test_directions_to_office_want_images(self):
        analysis = analyze_court_query("Where is the registry office?")
        assert analysis.topics.building_images is True

    def test_general(self):
        analysis = analyze_court_query("Tell me something")

        assert analysis.topics.general is True
        assert analysis.needs_detailed_info is False


class TestCourtFetchStrategy:
    def test_room_question(self):
        strategy = get_court_data_fetch_strategy(analyze_court_query("Where is room number 5?"))

        assert strategy.fetch_rooms is True
        assert strategy.fetch_buildings is True
        assert strategy.fetch_building_images is True
        assert strategy.rooms_limit == 50
        assert strategy.buildings_limit == 5

    def test_timings(self):
        strategy = get_court_data_fetch_strategy(analyze_court_query("What are the court timings?"))

        assert strategy.fetch_timings is True
        assert strategy.fetch_settings is False

    def test_general_reads_settings(self):
        strategy = get_court_data_fetch_strategy(analyze_court_query("Tell me something"))

        assert strategy.fetch_settings is True
        assert strategy.fetch_rooms is False


class TestImageKeywords:
    def test_categories(self):
        assert extract_image_search_keywords("show me the registry counter") == [
            "registry",
            "counter",
        ]

    def test_none(self):
        assert extract_image_search_keywords("what time does it open") == []
