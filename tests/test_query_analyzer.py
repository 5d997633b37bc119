"""Tests for college query analysis."""

from wayfinder.core.query_analyzer import (
    QueryIntent,
    analyze_query_topics,
    classify_query_intent,
    get_data_fetch_strategy,
    indicates_missing_info,
    is_college_relevant,
)


class TestAnalyzeQueryTopics:
    def test_short_greeting(self):
        analysis = analyze_query_topics("Hello")

        assert analysis.topics.greeting is True
        assert analysis.topics.active() == ["greeting"]
        assert analysis.needs_detailed_info is False

    def test_courses(self):
        analysis = analyze_query_topics("What courses are available?")

        assert analysis.topics.courses is True
        assert analysis.topics.general is False

    def test_fees_imply_courses(self):
        analysis = analyze_query_topics("What is the fee for BCA?")

        assert analysis.topics.fees is True
        assert analysis.topics.courses is True

    def test_admission_implies_courses(self):
        analysis = analyze_query_topics("How do I apply for admission?")

        assert analysis.topics.admissions is True
        assert analysis.topics.courses is True

    def test_no_topic_is_general(self):
        analysis = analyze_query_topics("Tell me about the college")

        assert analysis.topics.general is True
        assert analysis.needs_detailed_info is True

    def test_short_keyword_needs_word_boundary(self):
        # "ba" must not fire inside "bank"
        analysis = analyze_query_topics("Is there a bank nearby?")
        assert analysis.topics.courses is False

    def test_greeting_keyword_inside_a_word(self):
        analysis = analyze_query_topics("which course?")

        assert analysis.topics.greeting is False
        assert analysis.topics.courses is True

    def test_long_query_needs_detail(self):
        analysis = analyze_query_topics(
            "Which teacher takes the computer classes for the second year students?"
        )
        assert analysis.topics.staff is True
        assert analysis.needs_detailed_info is True


class TestDataFetchStrategy:
    def test_greeting_reads_settings_only(self):
        strategy = get_data_fetch_strategy(analyze_query_topics("hi"))

        assert strategy.fetch_settings is True
        assert strategy.fetch_courses is False
        assert strategy.fetch_staff is False

    def test_general_reads_overview(self):
        strategy = get_data_fetch_strategy(analyze_query_topics("Tell me about the college"))

        assert strategy.fetch_courses is True
        assert strategy.fetch_departments is True
        assert strategy.fetch_settings is True
        assert strategy.courses_limit == 50

    def test_regular_limits(self):
        strategy = get_data_fetch_strategy(analyze_query_topics("Any notice?"))

        assert strategy.fetch_notices is True
        assert strategy.fetch_courses is False
        assert (strategy.courses_limit, strategy.staff_limit) == (50, 30)
        assert (strategy.events_limit, strategy.notices_limit) == (15, 15)

    def test_detailed_limits(self):
        strategy = get_data_fetch_strategy(analyze_query_topics("Explain the staff list"))

        assert strategy.fetch_staff is True
        assert (strategy.courses_limit, strategy.staff_limit) == (100, 50)
        assert (strategy.events_limit, strategy.notices_limit) == (30, 30)

    def test_facilities_read_settings_and_department_data(self):
        strategy = get_data_fetch_strategy(analyze_query_topics("Is there a library?"))

        assert strategy.fetch_settings is True
        assert strategy.fetch_department_data is True
        assert strategy.fetches_anything is True


class TestRelevance:
    def test_off_topic_rejected(self):
        assert is_college_relevant("Who is the prime minister of India?") is False
        assert is_college_relevant("What is the cricket score today?") is False

    def test_greeting_always_relevant(self):
        assert is_college_relevant("Hello, who is the prime minister?") is True

    def test_college_question_relevant(self):
        assert is_college_relevant("What courses do you offer?") is True

    def test_ambiguous_passes(self):
        assert is_college_relevant("Where is it?") is True


class TestClassifyQueryIntent:
    def test_greeting(self):
        assert classify_query_intent("Thank you so much") == QueryIntent.GREETING

    def test_public_info(self):
        assert classify_query_intent("What is the history of the college?") == QueryIntent.PUBLIC_INFO

    def test_admin_info(self):
        assert classify_query_intent("When is the exam?") == QueryIntent.ADMIN_INFO

    def test_mixed(self):
        assert classify_query_intent("Principal and courses") == QueryIntent.MIXED

    def test_unknown_defaults_to_admin_info(self):
        assert classify_query_intent("xyz") == QueryIntent.ADMIN_INFO


class TestIndicatesMissingInfo:
    def test_hinglish_admission(self):
        assert indicates_missing_info("Mujhe is baare mein pata nahi hai") is True

    def test_english_admission(self):
        assert indicates_missing_info("I don't have this information") is True

    def test_real_answer(self):
        assert indicates_missing_info("BCA is a three year course.") is False
