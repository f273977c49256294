import json

from rulebot import catalog
from rulebot.main import main


class TestAsk:
    def test_plain_reply(self, capsys):
        assert main(["ask", "BSOD on boot"]) == 0
        out = capsys.readouterr().out
        assert out == catalog.CRASH.response.render() + "\n"

    def test_json_reply(self, capsys):
        assert main(["ask", "vpn keeps dropping", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["title"] == "VPN Issue – Quick Checklist"
        assert len(data["steps"]) == 7

    def test_blank_message(self, capsys):
        assert main(["ask", "   "]) == 2
        assert "message is required" in capsys.readouterr().err
