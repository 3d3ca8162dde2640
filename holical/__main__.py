"""Main entry point for holical."""

import logging
import os
import sys

from textual.logging import TextualHandler

from holical.app import HolicalApp
from holical.config import DEFAULT_CONFIG_PATH, Config


def _configure_logging() -> None:
    """Send log records to the Textual devtools console."""
    level_name = os.getenv("HOLICAL_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, handlers=[TextualHandler()])


def configure() -> None:
    """Ask for each setting, keeping the current value on an empty answer."""
    defaults = Config.load() or Config()
    sys.stdout.write(f"Editing {DEFAULT_CONFIG_PATH} (press Enter to keep a value)\n\n")
    data_source = input(f"Data directory or URL [{defaults.data_source}]: ")
    country = input(f"Default country [{defaults.default_country}]: ")
    language = input(f"Default language [{defaults.default_language}]: ")
    site_url = input(f"Site URL for external pages [{defaults.site_url}]: ")

    config = Config(
        data_source=data_source or defaults.data_source,
        default_country=country or defaults.default_country,
        default_language=language or defaults.default_language,
        fallback_language=defaults.fallback_language,
        languages=defaults.languages,
        site_url=site_url or defaults.site_url,
    )
    config.save()
    sys.stdout.write(f"\nSaved: {config.default_country} in {config.default_language}, ")
    sys.stdout.write(f"data from {config.data_source}\n")


def main() -> None:
    """Main entry point."""
    if len(sys.argv) > 1 and sys.argv[1] == "config":
        configure()
        return

    _configure_logging()
    config = Config.from_env() or Config.load() or Config()

    # An optional path (e.g. a shared article link) becomes the first history entry
    initial_path = sys.argv[1] if len(sys.argv) > 1 else "/"

    app = HolicalApp(config, initial_path)
    app.run()
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
