"""Tests for the settings structure.

Verifies the domain-based organization of settings modules.
"""

from infrastructure.configuration import settings as settings_singleton
from infrastructure.configuration.base import FeatureSettings, InfrastructureSettings
from infrastructure.configuration.features import LocalizationSettings
from infrastructure.configuration.infrastructure import ServerSettings
from infrastructure.services.providers import get_settings


class TestSettingsStructure:
    """Test the domain-based settings structure."""

    def test_settings_loads_all_sections(self):
        settings = get_settings()
        assert hasattr(settings, "localization")
        assert hasattr(settings, "server")

    def test_feature_settings_inherit_base(self):
        assert issubclass(LocalizationSettings, FeatureSettings)

    def test_infrastructure_settings_inherit_base(self):
        assert issubclass(ServerSettings, InfrastructureSettings)

    def test_base_classes_share_env_configuration(self):
        for base in (FeatureSettings, InfrastructureSettings):
            config = base.model_config
            assert config["env_file"] == ".env"
            assert config["case_sensitive"] is True
            assert config["extra"] == "ignore"

    def test_module_singleton_is_available(self):
        assert settings_singleton.localization.supported_locales
        assert settings_singleton.server.LOCALE_QUERY_PARAMETER
