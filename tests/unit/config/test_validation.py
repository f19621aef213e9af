import pytest

from gitglance.config import (
    ConfigSource,
    ConfigSourceName,
    raise_if_validation_errors,
    validate_config,
    validate_source,
)
from gitglance.exceptions import ConfigValidationError


class TestValidateConfig:
    def test_empty_config_is_valid(self) -> None:
        assert validate_config({}) == []

    def test_unknown_keys_ignored_in_lenient_mode(self) -> None:
        assert validate_config({"status": {"colour": "red"}, "extra": 1}) == []

    def test_unknown_keys_rejected_in_strict_mode(self) -> None:
        issues = validate_config({"status": {"colour": "red"}}, strict=True)

        assert [i.key for i in issues] == ["status.colour"]

    def test_invalid_repo_tag(self) -> None:
        issues = validate_config({"repos": {"~/a": "c", "~/b": "x"}})

        assert len(issues) == 1
        assert issues[0].key == "repos.~/b"
        assert issues[0].actual == "x"
        assert issues[0].severity == "error"

    def test_negative_timeout(self) -> None:
        issues = validate_config({"status": {"timeout_ms": -5}})

        assert issues[0].key == "status.timeout_ms"
        assert issues[0].expected == ">= 0"


class TestValidateSource:
    def test_missing_source_is_skipped(self) -> None:
        source = ConfigSource(
            name=ConfigSourceName.USER,
            path=None,
            exists=False,
            values={"status": {"timeout_ms": -1}},
        )

        assert validate_source(source) == []

    def test_issues_carry_source_name(self) -> None:
        source = ConfigSource(
            name=ConfigSourceName.ENV,
            path=None,
            exists=True,
            values={"logging": {"level": "loud"}},
        )

        issues = validate_source(source)

        assert issues[0].source == "env"


class TestRaiseIfValidationErrors:
    def test_no_issues(self) -> None:
        raise_if_validation_errors([])

    def test_raises_first_error(self) -> None:
        issues = validate_config({"repos": {"~/b": "x"}})

        with pytest.raises(ConfigValidationError) as exc_info:
            raise_if_validation_errors(issues, source="config.toml")

        assert exc_info.value.key == "repos.~/b"
        assert exc_info.value.source == "config.toml"
