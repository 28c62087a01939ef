"""Config settings – dataclass settings loaded from the environment."""
from advanced_search.config.settings.builder import DUPLICATE_POLICIES, BuilderSettings
from advanced_search.config.settings.loaders import EnvSettingsLoader, Settings, SettingsLoader

__all__ = ["DUPLICATE_POLICIES", "BuilderSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
