import pytest
from rulebot import catalog
from rulebot.types import ChatRequest, ResponseTemplate


class TestRender:
    def test_steps_rendering(self):
        """Test the checklist layout byte for byte."""
        r = ResponseTemplate(title="T", steps=("one", "two"), tip="hint")
        assert r.render() == "T\n\n- one\n- two\n\nTip: hint"

    def test_steps_without_tip(self):
        r = ResponseTemplate(title="T", steps=("one",))
        assert r.render() == "T\n\n- one\n\nTip:"

    def test_body_rendering(self):
        assert catalog.FALLBACK.render() == f"Tell me a bit more\n\n{catalog.FALLBACK.body}"
        assert ResponseTemplate(title="  T").render() == "T"

    @pytest.mark.parametrize("rule", [r for r in catalog.RULES if r.response.has_steps], ids=lambda r: r.name)
    def test_checklist_shape(self, rule):
        """Test that the title comes first and every step is bulleted."""
        text = rule.response.render()
        lines = text.split("\n")
        assert lines[0] == rule.response.title
        for step in rule.response.steps:
            assert f"- {step}" in lines
        assert lines[-1] == f"Tip: {rule.response.tip}"

    def test_payload(self):
        payload = catalog.PRINTER.response.as_payload()
        assert list(payload) == ["reply", "title", "steps", "tip"]
        assert isinstance(payload["steps"], list)
        assert payload["reply"].startswith("Printer Not Printing")

        greeting = catalog.GREETING.response.as_payload()
        assert set(greeting) == {"reply", "title", "body"}


class TestChatRequest:
    @pytest.mark.parametrize("value,expected", [
        (None, ""),
        ("", ""),
        (False, ""),
        (0, ""),
        ("my vpn", "my vpn"),
        (True, "true"),
        (42, "42"),
        (2.0, "2"),
        (1.5, "1.5"),
        ({}, "[object Object]"),
        ({"a": "wifi"}, "[object Object]"),
        ([], ""),
        ([""], ""),
        (["wifi", "down"], "wifi,down"),
        (["vpn", None, False, 3.0, ["x", "y"]], "vpn,,false,3,x,y"),
    ])
    def test_text_coercion(self, value, expected):
        assert ChatRequest(message=value).text() == expected

    def test_missing_message(self):
        assert ChatRequest().text() == ""
