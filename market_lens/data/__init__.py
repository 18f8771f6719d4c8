"""
Price data module.

Immutable OHLCV bar and series models, input parsing and data-quality
validation for the analysis pipeline.
"""
