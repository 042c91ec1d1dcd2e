"""Test structured logging setup."""
import json
import structlog
from amount_input.utils.logging import get_logger, setup_logging


class TestSetupLogging:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_output(self, capsys):
        setup_logging("INFO")
        get_logger("test").info("amount_input_changed", display_text="1,234")
        line = capsys.readouterr().out.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "amount_input_changed"
        assert event["display_text"] == "1,234"
        assert event["level"] == "info"

    def test_level_filters_debug(self, capsys):
        setup_logging("WARNING")
        get_logger("test").debug("hidden")
        assert capsys.readouterr().out == ""

    def test_unknown_level_defaults_to_info(self, capsys):
        setup_logging("chatty")
        get_logger("test").info("shown")
        assert "shown" in capsys.readouterr().out
