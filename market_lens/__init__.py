"""
Market Lens - Deterministic Market-State Analysis Pipeline

Derives a structured, deterministic market-state summary from daily OHLCV
history, generates conditional scenarios, and gates the summary on data
sufficiency before it is handed to an external interpreter.
"""

__version__ = "0.1.0"
__author__ = "Market Lens Team"
