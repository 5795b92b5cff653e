#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import yaml

from hfscore.config.loader import ConfigLoader
from hfscore.config.validation import ConfigValidator, ValidationError


def validate_instrument_config(loader: ConfigLoader, instrument_id: str) -> List[ValidationError]:
    """Validate merged configuration for a specific instrument."""
    config = loader.merge_config(instrument_id)
    return ConfigValidator.validate_config(config)


def configured_instruments(loader: ConfigLoader) -> List[str]:
    """List instruments with overrides in instruments.yaml."""
    instruments_file = loader.config_dir / "instruments.yaml"
    if not instruments_file.exists():
        return []
    with open(instruments_file) as f:
        data = yaml.safe_load(f) or {}
    return sorted(data.get("instruments", {}))


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating HF Score configuration in {loader.config_dir}...")

    instruments = configured_instruments(loader) + ["UNKNOWN-INSTRUMENT"]  # Should use defaults
    all_valid = True

    for instrument_id in instruments:
        print(f"\n📊 Validating {instrument_id}...")

        try:
            errors = validate_instrument_config(loader, instrument_id)

            if errors:
                print(f"❌ Found {len(errors)} validation errors:")
                for error in errors:
                    print(f"  • {error.field}: {error.message} (value: {error.value})")
                all_valid = False
            else:
                print(f"✅ {instrument_id} configuration is valid")

        except (OSError, yaml.YAMLError) as e:
            print(f"❌ Error validating {instrument_id}: {e}")
            all_valid = False

    if all_valid:
        print(f"\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
