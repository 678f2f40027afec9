#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hydration_app.config.loader import ConfigLoader
from hydration_app.config.validation import ConfigValidator


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating {loader.config_dir / 'tracker.yaml'}...")

    config = loader.merge_config()
    errors = ConfigValidator.validate_config(config)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print("✅ Configuration is valid")
    print(f"  storage: {config['storage']}")
    print(f"  logging: {config['logging']}")


if __name__ == "__main__":
    main()
