"""Tests for interpreter response parsing"""

from market_lens.interpretation.prompt import RESPONSE_SECTIONS
from market_lens.interpretation.response import parse_interpretation

FULL_RESPONSE = "\n\n".join(
    f"{heading}\n{key} content" for heading, key, _ in RESPONSE_SECTIONS
)


class TestParseInterpretation:
    """Test section extraction"""

    def test_all_sections(self):
        result = parse_interpretation(FULL_RESPONSE)

        assert len(result) == len(RESPONSE_SECTIONS)
        for _, key, _ in RESPONSE_SECTIONS:
            assert result[key] == f"{key} content"

    def test_markdown_headings(self):
        text = "## DIRECTIONAL BIAS:\nBearish\n\n**Confidence Level**\nMedium"
        result = parse_interpretation(text)

        assert result["directionalBias"] == "Bearish"
        assert result["confidenceLevel"] == "Medium"

    def test_multiline_section(self):
        text = "RISK FACTORS\n- volatility expanding\n- breadth narrowing\n\nMARKET REGIME\nUncertain"
        result = parse_interpretation(text)

        assert result["riskFactors"] == "- volatility expanding\n- breadth narrowing"
        assert result["marketRegime"] == "Uncertain"

    def test_missing_sections_use_fallbacks(self):
        result = parse_interpretation("DIRECTIONAL BIAS\nBullish")

        assert result["directionalBias"] == "Bullish"
        assert result["confidenceLevel"] == "Low"
        assert result["marketRegime"] == "Uncertain"
        assert result["riskFactors"] == "No risk factors identified"

    def test_missing_summary_uses_raw_text(self):
        text = "Free-form answer without headings. " * 30
        result = parse_interpretation(text)

        assert result["interpretationSummary"] == text[:500]
        assert result["directionalBias"] == "Neutral"

    def test_empty_section_uses_fallback(self):
        result = parse_interpretation("TREND MATURITY\n\nSIGNAL AGREEMENT\nHigh")

        assert result["trendMaturity"] == "Unknown"
        assert result["signalAgreement"] == "High"
