"""Config – 12-factor settings for the article query compiler."""

from article_search.config.search import SearchSettings
from article_search.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from article_search.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SearchSettings",
    "Settings",
    "SettingsLoader",
]
