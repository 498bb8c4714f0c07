"""
Tests for the settings resolvers.

Covers the fatal missing-address branch, the silent retry-count fallback and
the compiled-in flux capacitor settings.
"""

import pytest

from configinject.config.sources import MappingConfigSource
from configinject.core.errors import ConfigurationError
from configinject.core.models import EmailSettings, FluxCapacitorSettings
from configinject.core.resolvers import (
    DEFAULT_NUMBER_OF_RETRIES,
    EmailSettingsResolver,
    FluxCapacitorSettingsProvider,
)


def resolve(values):
    return EmailSettingsResolver().resolve(MappingConfigSource(values))


class TestEmailSettingsResolverScenarios:
    """The four reference scenarios."""

    def test_scenario_a_valid_configuration(self):
        """Test both keys present and valid."""
        settings = resolve({"defaultEmail": "a@b.com", "numberRetries": "3"})
        assert settings == EmailSettings(default_email_address="a@b.com", number_of_retries=3)

    def test_scenario_b_missing_retries(self):
        """Test missing retry key falls back to 10."""
        settings = resolve({"defaultEmail": "a@b.com"})
        assert settings == EmailSettings(default_email_address="a@b.com", number_of_retries=10)

    def test_scenario_c_empty_email(self):
        """Test empty address fails resolution."""
        with pytest.raises(ConfigurationError, match="missing default email"):
            resolve({"defaultEmail": "", "numberRetries": "5"})

    def test_scenario_d_negative_retries(self):
        """Test negative retry count falls back to 10."""
        settings = resolve({"defaultEmail": "a@b.com", "numberRetries": "-1"})
        assert settings == EmailSettings(default_email_address="a@b.com", number_of_retries=10)


class TestEmailSettingsResolver:
    """Test resolver behaviour beyond the reference scenarios."""

    @pytest.mark.parametrize("retries", ["0", "1", "42", "2147483647"])
    def test_valid_retries_used_exactly(self, retries):
        settings = resolve({"defaultEmail": "ops@example.org", "numberRetries": retries})
        assert settings.default_email_address == "ops@example.org"
        assert settings.number_of_retries == int(retries)

    def test_retries_with_surrounding_whitespace(self):
        """Test whitespace around the number is tolerated."""
        assert resolve({"defaultEmail": "a@b.com", "numberRetries": " 7 "}).number_of_retries == 7

    @pytest.mark.parametrize(
        "retries", ["abc", "", "   ", "3.5", "1e3", "1_000", "-5", "2147483648", "٣"]
    )
    def test_invalid_retries_fall_back(self, retries):
        settings = resolve({"defaultEmail": "a@b.com", "numberRetries": retries})
        assert settings.number_of_retries == DEFAULT_NUMBER_OF_RETRIES

    @pytest.mark.parametrize("email", [None, "", " ", "\t\n"])
    @pytest.mark.parametrize("retries", [None, "3", "-1", "junk"])
    def test_blank_email_fails_regardless_of_retries(self, email, retries):
        values = {}
        if email is not None:
            values["defaultEmail"] = email
        if retries is not None:
            values["numberRetries"] = retries

        with pytest.raises(ConfigurationError) as exc_info:
            resolve(values)
        assert exc_info.value.key == "defaultEmail"

    def test_email_returned_as_read(self):
        """Test the address is not stripped or normalised."""
        assert resolve({"defaultEmail": " A@B.com"}).default_email_address == " A@B.com"

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            resolve({})

    def test_get_settings_uses_bound_source(self, valid_values):
        """Test resolving against the source given at construction."""
        resolver = EmailSettingsResolver(MappingConfigSource(valid_values))
        assert resolver.get_settings().number_of_retries == 3

    def test_get_settings_without_source(self):
        with pytest.raises(ConfigurationError, match="no configuration source"):
            EmailSettingsResolver().get_settings()

    def test_reads_only_known_keys(self):
        """Test resolution reads the two keys and nothing else."""
        seen = []

        class RecordingSource:
            def get_value(self, name):
                seen.append(name)
                return {"defaultEmail": "a@b.com"}.get(name)

        EmailSettingsResolver().resolve(RecordingSource())
        assert seen == ["defaultEmail", "numberRetries"]

    def test_missing_email_stops_before_retries(self):
        seen = []

        class RecordingSource:
            def get_value(self, name):
                seen.append(name)
                return None

        with pytest.raises(ConfigurationError):
            EmailSettingsResolver().resolve(RecordingSource())
        assert seen == ["defaultEmail"]


class TestFluxCapacitorSettingsProvider:
    """Test the compiled-in provider."""

    def test_constant_values(self):
        settings = FluxCapacitorSettingsProvider().get()
        assert settings == FluxCapacitorSettings(required_speed_in_mph=88, required_gigawatts=1.21)

    def test_get_settings_alias(self):
        provider = FluxCapacitorSettingsProvider()
        assert provider.get_settings() == provider.get()

    def test_ignores_environment(self, monkeypatch):
        """Test external state has no effect."""
        monkeypatch.setenv("requiredGigawatts", "2.42")
        monkeypatch.setenv("CONFIGINJECT_SOURCE", "file")
        settings = FluxCapacitorSettingsProvider().get()
        assert (settings.required_speed_in_mph, settings.required_gigawatts) == (88, 1.21)
