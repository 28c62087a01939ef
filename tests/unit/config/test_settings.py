"""Unit tests for BuilderSettings and the environment loader."""

import pytest

from advanced_search.config.settings import BuilderSettings, EnvSettingsLoader
from advanced_search.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from advanced_search.model import LogicalOperator


# ---------------------------------------------------------------------------
# BuilderSettings
# ---------------------------------------------------------------------------


class TestBuilderSettings:
    def test_defaults(self) -> None:
        s = BuilderSettings()
        assert s.max_conditions == 10
        assert s.duplicate_policy == "reject"
        assert s.rejects_duplicates is True
        assert s.logical_operator is None
        assert s.history_limit == 50

    def test_logical_operator(self) -> None:
        assert BuilderSettings(default_logical_operator="and").logical_operator is LogicalOperator.AND

    @pytest.mark.parametrize("kwargs", [
        {"max_conditions": 0},
        {"duplicate_policy": "merge"},
        {"default_logical_operator": "xor"},
        {"history_limit": -1},
    ])
    def test_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(InvalidSettingValueError):
            BuilderSettings(**kwargs)

    def test_allow_policy(self) -> None:
        assert BuilderSettings(duplicate_policy="allow").rejects_duplicates is False

    def test_env_keys(self) -> None:
        assert BuilderSettings.env_key("max_conditions") == "ADVANCED_SEARCH_MAX_CONDITIONS"
        assert set(BuilderSettings.env_keys()) == {
            "max_conditions", "duplicate_policy", "default_logical_operator", "history_limit",
        }

    def test_closed_choice_lists_allowed_values(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            BuilderSettings(duplicate_policy="merge")
        assert exc_info.value.detail["allowed"] == ["allow", "reject"]
        assert exc_info.value.detail["setting"] == "duplicate_policy"


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ADVANCED_SEARCH_MAX_CONDITIONS", "20")
        monkeypatch.setenv("ADVANCED_SEARCH_DUPLICATE_POLICY", "allow")
        monkeypatch.setenv("ADVANCED_SEARCH_DEFAULT_LOGICAL_OPERATOR", "or")
        s = EnvSettingsLoader().load(BuilderSettings)
        assert s.max_conditions == 20
        assert s.duplicate_policy == "allow"
        assert s.logical_operator is LogicalOperator.OR

    def test_explicit_mapping(self) -> None:
        s = EnvSettingsLoader({"ADVANCED_SEARCH_HISTORY_LIMIT": "5"}).load(BuilderSettings)
        assert s.history_limit == 5

    def test_missing_uses_defaults(self) -> None:
        assert EnvSettingsLoader({}).load(BuilderSettings) == BuilderSettings()

    def test_non_integer(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"ADVANCED_SEARCH_MAX_CONDITIONS": "many"}).load(BuilderSettings)
        assert exc_info.value.setting_name == "ADVANCED_SEARCH_MAX_CONDITIONS"

    def test_semantic_error_propagates(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"ADVANCED_SEARCH_DUPLICATE_POLICY": "merge"}).load(BuilderSettings)


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_missing_required(self) -> None:
        import dataclasses
        from typing import ClassVar

        from advanced_search.config.settings import Settings

        @dataclasses.dataclass
        class Needs(Settings):
            _prefix: ClassVar[str] = "NEEDS"
            token: str

        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(Needs)
        assert exc_info.value.setting_name == "NEEDS_TOKEN"
        assert exc_info.value.code == "missing_required_setting"
        assert exc_info.value.detail == {"setting": "NEEDS_TOKEN", "field": "token"}
