"""Unit tests for registry response models."""

import pytest
from pydantic import ValidationError
from semver import Version
from upstall.models.registry import CrateResponse


class TestCrateResponse:
    """Tests for CrateResponse model."""

    def test_parses_payload(self, crate_payload: dict[str, object]) -> None:
        """A crates.io payload is validated and extra fields ignored."""
        response = CrateResponse.model_validate(crate_payload)

        assert response.crate.name == "ripgrep"
        assert len(response.versions) == 4
        assert response.versions[0].num == Version.parse("14.1.1")
        assert response.versions[2].yanked is True
        assert response.versions[3].yanked is False

    def test_version_numbers_skip_yanked(self, crate_payload: dict[str, object]) -> None:
        """Yanked versions are excluded by default."""
        response = CrateResponse.model_validate(crate_payload)

        assert [str(v) for v in response.version_numbers()] == ["14.1.1", "14.1.0", "13.0.0"]

    def test_version_numbers_include_yanked(self, crate_payload: dict[str, object]) -> None:
        """Yanked versions are returned on request."""
        response = CrateResponse.model_validate(crate_payload)

        assert len(response.version_numbers(include_yanked=True)) == 4

    def test_missing_versions_is_empty(self) -> None:
        """A response without versions has none."""
        response = CrateResponse.model_validate({"crate": {"name": "ghost"}})

        assert response.version_numbers() == []

    def test_invalid_version_rejected(self) -> None:
        """Version numbers must be valid semantic versions."""
        with pytest.raises(ValidationError):
            CrateResponse.model_validate({"crate": {"name": "x"}, "versions": [{"num": "1.0"}]})

    def test_non_string_version_rejected(self) -> None:
        """Version numbers must be strings."""
        with pytest.raises(ValidationError):
            CrateResponse.model_validate({"crate": {"name": "x"}, "versions": [{"num": 1}]})

    def test_missing_crate_rejected(self) -> None:
        """The crate sub-object is required."""
        with pytest.raises(ValidationError):
            CrateResponse.model_validate({"versions": []})
