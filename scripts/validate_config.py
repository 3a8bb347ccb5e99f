#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from signal_bot.config.loader import ConfigLoader
from signal_bot.config.validation import ConfigValidator
from signal_bot.errors import ConfigurationError


def main() -> int:
    """Validate the merged configuration and print the effective values."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print("🔍 Validating signal bot configuration...")

    loader = ConfigLoader.create(config_dir)
    print(f"   Config directory: {loader.config_dir}")

    try:
        merged = loader.merge_config()
    except ConfigurationError as e:
        print(f"❌ {e}")
        return 1

    errors = ConfigValidator.validate_config(merged)
    if errors:
        print(f"❌ {len(errors)} validation error(s):")
        for err in errors:
            print(f"   - {err.field}: {err.message} (got: {err.value!r})")
        return 1

    try:
        config = loader.build_config()
    except ConfigurationError as e:
        print(f"❌ {e}")
        return 1

    for section, params in vars(config).items():
        print(f"   [{section}]")
        for name, value in vars(params).items():
            print(f"     {name} = {value}")

    print("✅ Configuration is valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
