#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from listy.config.loader import ConfigLoader
from listy.config.validation import ConfigValidator, ValidationError


def validate_merged_config(
    loader: ConfigLoader,
    overrides: Optional[Dict[str, Any]] = None
) -> List[ValidationError]:
    """Validate the merged configuration with optional overrides."""
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def report(label: str, errors: List[ValidationError]) -> bool:
    """Print validation results and return True when valid."""
    if errors:
        print(f"❌ {label}: found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value!r})")
        return False

    print(f"✅ {label} is valid")
    return True


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print("🔍 Validating listy configuration...")
    print(f"   Config directory: {loader.config_dir}")

    all_valid = True

    try:
        all_valid &= report("Configuration file", validate_merged_config(loader))
    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        all_valid = False

    print(f"\n📋 Testing call-level overrides...")
    test_overrides = {
        "formatter": {"placeholder": "$"},
        "logging": {"level": "DEBUG", "format_json": True},
    }

    try:
        all_valid &= report("Override configuration", validate_merged_config(loader, test_overrides))
    except Exception as e:
        print(f"❌ Error testing overrides: {e}")
        all_valid = False

    if all_valid:
        print(f"\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
