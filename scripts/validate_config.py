#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import yaml

from market_lens.config.loader import ConfigLoader
from market_lens.config.validation import ConfigValidator, ValidationError


def validate_symbol_config(loader: ConfigLoader, symbol: str) -> List[ValidationError]:
    """Validate merged configuration for a specific symbol."""
    return ConfigValidator.validate_config(loader.merge_config(symbol))


def configured_symbols(loader: ConfigLoader) -> List[str]:
    """Symbols listed in symbols.yaml."""
    symbols_file = loader.config_dir / "symbols.yaml"
    if not symbols_file.exists():
        return []
    with open(symbols_file) as f:
        return list((yaml.safe_load(f) or {}).get("symbols", {}) or {})


def main():
    """Main validation function."""
    print("🔍 Validating market-lens configuration...")

    loader = ConfigLoader.create()

    # Every configured symbol plus one that falls back to defaults
    symbols = configured_symbols(loader) + ["UNKNOWN-SYMBOL"]

    all_valid = True

    for symbol in symbols:
        print(f"\n📊 Validating {symbol}...")

        errors = validate_symbol_config(loader, symbol)
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {symbol} configuration is valid")

    print("\n📋 Testing request-level overrides...")
    test_overrides = {
        "volatility": {"elevated_pct": 3.0},
        "validation": {"max_unknown_ratio": 0.25},
    }

    errors = ConfigValidator.validate_config(loader.merge_config("UNKNOWN-SYMBOL", test_overrides))
    if errors:
        print("❌ Request override validation failed:")
        for error in errors:
            print(f"  • {error.field}: {error.message}")
        all_valid = False
    else:
        print("✅ Request override validation passed")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
