"""Tests for ParserConfig defaults, builder methods and parser integration."""

from lineproto.config import ParserConfig
from lineproto.parser import LineProtocolParser

TRAILING = 'm s="x"junk 1'


class TestParserConfig:
    """Test ParserConfig defaults and builder methods."""

    def test_defaults(self):
        cfg = ParserConfig()
        assert cfg.strict is False

    def test_with_strict(self):
        cfg = ParserConfig().with_strict()
        assert cfg.strict is True

    def test_builder_chain(self):
        cfg = ParserConfig().with_strict().with_lenient()
        assert cfg.strict is False
        assert ParserConfig().with_strict(False).strict is False


class TestParserIntegration:
    """Test how the parser picks its configuration."""

    def test_flag(self):
        assert LineProtocolParser(TRAILING, strict=True).strict
        assert not LineProtocolParser(TRAILING).strict

    def test_config_wins_over_flag(self):
        parser = LineProtocolParser(TRAILING, strict=True, config=ParserConfig())
        assert not parser.strict
        assert parser.has_next()

    def test_strict_config_drops_line(self):
        parser = LineProtocolParser(TRAILING, config=ParserConfig(strict=True))
        assert not parser.has_next()
        assert parser.rejected_lines == 1
