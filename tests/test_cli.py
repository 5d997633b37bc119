"""Tests for the command line interface."""

from typer.testing import CliRunner

from wayfinder.cli import app

runner = CliRunner()


class TestInfoCommands:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "Wayfinder v0.1.0" in result.output

    def test_info(self):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "College: RKSD College, Kaithal" in result.output
        assert "openai -> groq" in result.output


class TestQueryCommands:
    def test_analyze(self):
        result = runner.invoke(app, ["analyze", "What courses are available?"])

        assert result.exit_code == 0
        assert "courses" in result.output
        assert "fetch_courses" in result.output

    def test_analyze_json(self):
        result = runner.invoke(app, ["analyze", "hello", "--format", "json"])

        assert result.exit_code == 0
        assert '"intent": "greeting"' in result.output

    def test_court_analyze(self):
        result = runner.invoke(app, ["court-analyze", "Where is room number 5?"])

        assert result.exit_code == 0
        assert "room_number" in result.output
        assert "directions" in result.output

    def test_lookup_match(self):
        result = runner.invoke(app, ["lookup", "certified copy kahan milegi"])

        assert result.exit_code == 0
        assert "Room: 14" in result.output

    def test_lookup_no_match(self):
        result = runner.invoke(app, ["lookup", "what is the weather"])
        assert result.exit_code == 1


class TestSpeechCommands:
    def test_normalize(self):
        result = runner.invoke(app, ["normalize", "Call 9876543210"])

        assert result.exit_code == 0
        assert "nine eight seven six five" in result.output

    def test_normalize_clean(self):
        result = runner.invoke(app, ["normalize", "**Bold** text", "--clean"])

        assert result.exit_code == 0
        assert "**" not in result.output

    def test_chunk(self):
        result = runner.invoke(app, ["chunk", "First sentence. Second sentence.", "--size", "20"])

        assert result.exit_code == 0
        assert "2 chunk(s)" in result.output
