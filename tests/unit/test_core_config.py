"""Unit tests for Settings validation."""

import pytest
from pydantic import ValidationError

from credential_service.core.config import Settings, get_settings
from credential_service.core.enums import EmailBackend, Environment

SECRET = "x" * 32


def make_settings(**overrides) -> Settings:
    values = {"database_url": "sqlite+aiosqlite:///:memory:", "jwt_secret_key": SECRET}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.mark.unit
class TestSettings:
    """Test Settings loading and validation."""

    def test_test_environment_is_loaded(self):
        """Test the suite's environment variables reach get_settings()."""
        settings = get_settings()

        assert settings.environment == Environment.TESTING
        assert settings.bcrypt_rounds == 4
        assert settings.email_backend == EmailBackend.STUB

    def test_short_jwt_secret_rejected(self):
        """Test signing secrets under 32 characters fail validation."""
        with pytest.raises(ValidationError, match="at least 32 characters"):
            make_settings(jwt_secret_key="too-short")

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_out_of_range_rejected(self, rounds):
        """Test bcrypt rounds outside 4..31 fail validation."""
        with pytest.raises(ValidationError, match="between 4 and 31"):
            make_settings(bcrypt_rounds=rounds)

    def test_jwt_expire_hours_must_be_positive(self):
        """Test zero token lifetime fails validation."""
        with pytest.raises(ValidationError):
            make_settings(jwt_expire_hours=0)

    def test_web_app_url_trailing_slash_removed(self):
        """Test link base URL is normalized."""
        settings = make_settings(web_app_url="https://app.example.com/")

        assert settings.web_app_url == "https://app.example.com"

    def test_environment_flags(self):
        """Test is_development is set only for the development environment."""
        assert make_settings(environment="development").is_development
        assert not make_settings(environment="testing").is_development
        assert not make_settings(environment="production").is_development
