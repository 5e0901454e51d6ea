"""Tests for escaper configuration."""

import re

import pytest

from markup_escaper.character.tables import XML_CODE_MAP, XML_REPLACER
from markup_escaper.shared.config import (
    PRESET_NAMES,
    ConfigError,
    ConfigValidationError,
    EscaperConfig,
)


class TestEscaperConfig:
    """Test suite for EscaperConfig."""

    def test_string_trigger_is_compiled(self):
        """Test a pattern string is compiled on construction."""
        config = EscaperConfig(trigger="[<]", table={0x3C: "&lt;"})

        assert isinstance(config.trigger, re.Pattern)
        assert config.trigger.pattern == "[<]"
        assert config.numeric_fallback is False
        assert config.name == "custom"

    def test_table_is_copied_read_only(self):
        """Test the table is frozen and detached from the caller's dict."""
        table = {0x3C: "&lt;"}
        config = EscaperConfig(trigger="[<]", table=table)
        table[0x3E] = "&gt;"

        assert 0x3E not in config.table
        with pytest.raises(TypeError):
            config.table[0x3E] = "&gt;"

    def test_frozen(self):
        """Test configuration fields cannot be reassigned."""
        config = EscaperConfig.create_preset("text")
        with pytest.raises(AttributeError):
            config.name = "other"

    def test_invalid_pattern(self):
        """Test an uncompilable pattern is reported against the trigger field."""
        with pytest.raises(ConfigValidationError) as exc_info:
            EscaperConfig(trigger="[<", table={})

        assert exc_info.value.field_name == "trigger"

    def test_bytes_pattern_rejected(self):
        """Test a bytes pattern is refused."""
        with pytest.raises(ConfigValidationError, match="str"):
            EscaperConfig(trigger=re.compile(b"[<]"), table={})

    def test_key_not_in_trigger(self):
        """Test a table key the trigger never matches is rejected."""
        with pytest.raises(ConfigValidationError, match="U\\+003E") as exc_info:
            EscaperConfig(trigger="[<]", table={0x3C: "&lt;", 0x3E: "&gt;"})

        assert exc_info.value.field_name == "trigger"
        assert exc_info.value.suggestions

    def test_string_key_rejected_with_suggestion(self):
        """Test a character key gets an ord() suggestion."""
        with pytest.raises(ConfigValidationError) as exc_info:
            EscaperConfig(trigger="[<]", table={"<": "&lt;"})

        assert exc_info.value.field_name == "table"
        assert "ord('<')" in exc_info.value.suggestions[0]

    def test_unsafe_replacement_rejected(self):
        """Test replacements must be entity references."""
        with pytest.raises(ConfigValidationError, match="entity"):
            EscaperConfig(trigger="[<]", table={0x3C: "<"})
        with pytest.raises(ConfigValidationError):
            EscaperConfig(trigger="[<]", table={0x3C: "&l t;"})

    def test_numeric_replacements_accepted(self):
        """Test decimal and hexadecimal character references are valid."""
        config = EscaperConfig(trigger="[<>]", table={0x3C: "&#60;", 0x3E: "&#x3e;"})
        assert len(config.table) == 2

    def test_uncovered_trigger_rejected(self):
        """Test a table-only config must cover its trigger."""
        with pytest.raises(ConfigValidationError, match="without a table entry"):
            EscaperConfig(trigger="[<>]", table={0x3C: "&lt;"})

    def test_uncovered_trigger_allowed_with_fallback(self):
        """Test numeric fallback lifts the coverage requirement."""
        config = EscaperConfig(
            trigger="[<>]", table={0x3C: "&lt;"}, numeric_fallback=True
        )
        assert config.numeric_fallback is True

    def test_empty_match_trigger_rejected(self):
        """Test a trigger that can match nothing is refused."""
        with pytest.raises(ConfigValidationError, match="empty string") as exc_info:
            EscaperConfig(trigger=r"[<]*", table={0x3C: "&lt;"})

        assert exc_info.value.field_name == "trigger"

    def test_repeating_trigger_rejected(self):
        """Test a trigger matching runs of a table character is refused."""
        with pytest.raises(ConfigValidationError, match="exactly one character") as exc_info:
            EscaperConfig(trigger=r"<+", table={0x3C: "&lt;"})

        assert exc_info.value.field_name == "trigger"
        assert exc_info.value.suggestions

    def test_hashable(self):
        """Test equal configurations hash equally and work as set members."""
        first = EscaperConfig.create_preset("xml")
        second = EscaperConfig.create_preset("xml")

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second, EscaperConfig.create_preset("text")}) == 2
        assert {first: "xml"}[second] == "xml"

    def test_validation_error_is_config_error(self):
        """Test the exception hierarchy."""
        assert issubclass(ConfigValidationError, ConfigError)
        error = ConfigValidationError("bad")
        assert error.field_name is None
        assert error.suggestions == []


class TestPresets:
    """Test suite for the built-in presets."""

    @pytest.mark.parametrize("preset", PRESET_NAMES)
    def test_presets_build(self, preset):
        """Test every preset validates."""
        config = EscaperConfig.create_preset(preset)
        assert config.name == preset

    def test_xml_preset(self):
        """Test the general XML preset uses numeric fallback."""
        config = EscaperConfig.create_preset("xml")

        assert config.trigger is XML_REPLACER
        assert dict(config.table) == dict(XML_CODE_MAP)
        assert config.numeric_fallback is True

    def test_table_only_presets(self):
        """Test the other presets have no numeric fallback."""
        for preset in ("utf8", "attribute", "text"):
            assert EscaperConfig.create_preset(preset).numeric_fallback is False

    def test_invalid_preset(self):
        """Test error handling for invalid preset."""
        with pytest.raises(ValueError, match="Unknown preset"):
            EscaperConfig.create_preset("invalid_preset")
