"""
Tests for UploadLinkConfig.
"""

import logging

import pytest

from gql_upload import UploadHttpLink, UploadLinkConfig


@pytest.fixture
def package_logger():
    logger = logging.getLogger("gql_upload")
    level = logger.level
    yield logger
    logger.setLevel(level)


class TestUploadLinkConfig:
    """Tests for config factories and serialization."""

    def test_defaults(self):
        config = UploadLinkConfig()

        assert config.uri == "/graphql"
        assert config.headers == {}
        assert config.timeout == 30.0
        assert config.include_extensions is False
        assert config.preserve_header_case is False

    def test_for_testing(self):
        config = UploadLinkConfig.for_testing()

        assert config.uri == "http://testserver/graphql"
        assert config.timeout == 5.0
        assert config.log_level is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("GQL_UPLOAD_URI", "https://api.example.com/graphql")
        monkeypatch.setenv("GQL_UPLOAD_TIMEOUT", "12.5")
        monkeypatch.setenv("GQL_UPLOAD_INCLUDE_EXTENSIONS", "true")
        monkeypatch.setenv("GQL_UPLOAD_PRESERVE_HEADER_CASE", "TRUE")
        monkeypatch.setenv("GQL_UPLOAD_LOG_LEVEL", "DEBUG")

        config = UploadLinkConfig.from_env()

        assert config.uri == "https://api.example.com/graphql"
        assert config.timeout == 12.5
        assert config.include_extensions is True
        assert config.preserve_header_case is True
        assert config.log_level == "DEBUG"

    def test_from_env_defaults(self, monkeypatch):
        for name in (
            "GQL_UPLOAD_URI",
            "GQL_UPLOAD_TIMEOUT",
            "GQL_UPLOAD_INCLUDE_EXTENSIONS",
            "GQL_UPLOAD_PRESERVE_HEADER_CASE",
            "GQL_UPLOAD_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        assert UploadLinkConfig.from_env() == UploadLinkConfig()

    def test_from_env_timeout_disabled(self, monkeypatch):
        monkeypatch.setenv("GQL_UPLOAD_TIMEOUT", "none")

        assert UploadLinkConfig.from_env().timeout is None

    def test_from_env_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv("GQL_UPLOAD_TIMEOUT", "soon")

        with pytest.raises(ValueError):
            UploadLinkConfig.from_env()

    def test_dict_round_trip(self):
        config = UploadLinkConfig(
            uri="https://api.example.com/graphql",
            headers={"Authorization": "Bearer token"},
            timeout=None,
            include_extensions=True,
        )

        assert UploadLinkConfig.from_dict(config.to_dict()) == config

    def test_from_empty_dict(self):
        assert UploadLinkConfig.from_dict({}) == UploadLinkConfig()

    def test_to_link_config(self):
        config = UploadLinkConfig(headers={"X-Client": "cli"}, timeout=3.0, include_extensions=True)

        assert config.to_link_config() == {
            "http": {"include_extensions": True, "preserve_header_case": False},
            "headers": {"X-Client": "cli"},
            "options": {"timeout": 3.0},
        }

    def test_link_applies_explicit_log_level(self, package_logger):
        UploadHttpLink(UploadLinkConfig(log_level="ERROR"))

        assert package_logger.level == logging.ERROR

    def test_link_leaves_logger_level_by_default(self, package_logger):
        package_logger.setLevel(logging.DEBUG)

        UploadHttpLink(UploadLinkConfig())

        assert package_logger.level == logging.DEBUG
