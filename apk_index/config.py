"""Site configuration passed explicitly through the build pipeline."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

DEFAULT_DOWNLOAD_PREFIX = "./download/"

# JSON key -> field name
_CONFIG_KEYS = {
    "prefix": "prefix",
    "icon": "icon",
    "displayNameKo": "display_name_ko",
    "display_name_ko": "display_name_ko",
    "downloadPrefix": "download_prefix",
    "download_prefix": "download_prefix",
}


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class SiteConfig:
    """Branding and filename settings for one download page.

    ``prefix`` is the leading token of every APK filename, ``icon`` and
    ``display_name_ko`` show up in the rendered items and in the page
    title/header, ``download_prefix`` is prepended to filenames to build
    the download links.
    """

    prefix: str = "app"
    icon: str = "📱"
    display_name_ko: str = "앱"
    download_prefix: str = DEFAULT_DOWNLOAD_PREFIX

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SiteConfig":
        values: dict[str, str] = {}
        for key, value in data.items():
            field_name = _CONFIG_KEYS.get(key)
            if field_name is None:
                raise ConfigError(f"Unknown config key: {key}")
            if not isinstance(value, str):
                raise ConfigError(f"Config value for {key} must be a string")
            values[field_name] = value
        config = cls(**values)
        config.validate()
        return config

    def validate(self) -> None:
        if not self.prefix:
            raise ConfigError("Config 'prefix' must not be empty")

    def with_overrides(
        self,
        prefix: Optional[str] = None,
        icon: Optional[str] = None,
        display_name_ko: Optional[str] = None,
    ) -> "SiteConfig":
        changes = {
            k: v
            for k, v in (
                ("prefix", prefix),
                ("icon", icon),
                ("display_name_ko", display_name_ko),
            )
            if v is not None
        }
        if not changes:
            return self
        config = replace(self, **changes)
        config.validate()
        return config

    def as_dict(self) -> dict:
        return {
            "prefix": self.prefix,
            "icon": self.icon,
            "displayNameKo": self.display_name_ko,
            "downloadPrefix": self.download_prefix,
        }


__all__ = ["DEFAULT_DOWNLOAD_PREFIX", "ConfigError", "SiteConfig"]
