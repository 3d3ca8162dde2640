"""Configuration management."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "holical" / "config.ini"
BUNDLED_DATA_PATH = Path(__file__).parent / "data"


@dataclass
class Config:
    """Data source and session defaults."""

    data_source: str = str(BUNDLED_DATA_PATH)
    default_country: str = "colombia"
    default_language: str = "es"
    fallback_language: str = "en"
    languages: tuple[str, ...] = ("es", "en")
    site_url: str = ""

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        try:
            data_source = os.environ["HOLICAL_DATA_SOURCE"]
        except KeyError:
            return None

        defaults = cls()
        languages = os.environ.get("HOLICAL_LANGUAGES")
        return cls(
            data_source=data_source,
            default_country=os.environ.get("HOLICAL_COUNTRY", defaults.default_country),
            default_language=os.environ.get("HOLICAL_LANGUAGE", defaults.default_language),
            fallback_language=os.environ.get(
                "HOLICAL_FALLBACK_LANGUAGE", defaults.fallback_language
            ),
            languages=_split_languages(languages) if languages else defaults.languages,
            site_url=os.environ.get("HOLICAL_SITE_URL", defaults.site_url),
        )

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        config.read(path)
        section = config["holical"]
        defaults = cls()
        return cls(
            data_source=section.get("dataSource", defaults.data_source),
            default_country=section.get("country", defaults.default_country),
            default_language=section.get("language", defaults.default_language),
            fallback_language=section.get("fallbackLanguage", defaults.fallback_language),
            languages=_split_languages(section.get("languages", ",".join(defaults.languages))),
            site_url=section.get("siteUrl", defaults.site_url),
        )

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["holical"] = {
            "dataSource": self.data_source,
            "country": self.default_country,
            "language": self.default_language,
            "fallbackLanguage": self.fallback_language,
            "languages": ",".join(self.languages),
            "siteUrl": self.site_url,
        }
        with path.open("w") as config_file:
            config.write(config_file)


def _split_languages(value: str) -> tuple[str, ...]:
    return tuple(code.strip() for code in value.split(",") if code.strip())
