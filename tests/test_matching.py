import pytest
from rulebot.matching import first_match, has_any, has_any_word, normalize


class TestNormalize:
    def test_lowercases_and_collapses(self):
        """Test lowercasing and whitespace collapsing."""
        assert normalize("  My   WiFi\tIS\n\nDown  ") == "my wifi is down"

    def test_missing_input(self):
        """Test None and empty strings."""
        assert normalize(None) == ""
        assert normalize("") == ""
        assert normalize(" \t\n ") == ""

    @pytest.mark.parametrize("raw", [
        "Hello  World",
        "\tBSOD on   boot\n",
        "  ",
        "Wi‑Fi keeps dropping",
        "ALREADY normal",
    ])
    def test_idempotent(self, raw):
        """Test that normalizing twice changes nothing."""
        once = normalize(raw)
        assert normalize(once) == once


class TestHasAny:
    def test_substring_match(self):
        """Test plain substring containment, not whole words."""
        assert has_any("mywifi broke", ["wifi"]) == True
        assert has_any("this", ["hi"]) == True

    def test_no_match(self):
        assert has_any("printer jam", ["vpn", "tunnel"]) == False
        assert has_any("", ["vpn"]) == False
        assert has_any("anything", []) == False

    def test_first_match(self):
        """Test which keyword is reported for logging."""
        assert first_match("cisco anyconnect fails", {"anyconnect", "cisco anyconnect"}) == "anyconnect"
        assert first_match("nothing here", {"vpn"}) is None


class TestHasAnyWord:
    def test_word_boundaries(self):
        assert has_any_word("hi there", ["hi"]) == True
        assert has_any_word("well, hello!", ["hello"]) == True
        assert has_any_word("g'day mate", ["g'day"]) == True

    def test_inside_words(self):
        assert has_any_word("everything is slow", ["hi"]) == False
        assert has_any_word("they said", ["hey"]) == False
