# SPDX-License-Identifier: MIT
# Copyright (c) 2025 fauna-connection contributors

"""Tests for FaunaConfig and environment loading."""

import pytest

from fauna_connection import DEFAULT_PAGE_SIZE, FaunaConfig, load_fauna_config


class TestFaunaConfig:
    """Tests for the FaunaConfig dataclass."""

    def test_defaults(self):
        config = FaunaConfig()

        assert config.secret is None
        assert config.page_size == DEFAULT_PAGE_SIZE == 64
        assert config.client_options() == {}

    def test_client_options_only_includes_set_values(self):
        config = FaunaConfig(secret="s", domain="localhost", port=8443)

        assert config.client_options() == {"domain": "localhost", "port": 8443}

    def test_was_provided(self):
        config = FaunaConfig(secret="s", timeout=0)

        assert config.was_provided("timeout") is True
        assert config.was_provided("scheme") is False

    def test_with_updates_ignores_none(self):
        config = FaunaConfig(secret="s", domain="localhost")

        updated = config.with_updates(domain=None, scheme="http")

        assert updated.domain == "localhost"
        assert updated.scheme == "http"
        assert config.scheme is None

    def test_with_updates_unknown_key(self):
        with pytest.raises(AttributeError, match="no key 'region'"):
            FaunaConfig().with_updates(region="eu")

    def test_validate_missing_secret(self):
        with pytest.raises(ValueError, match="FAUNADB_SECRET_KEY"):
            FaunaConfig().validate()

    def test_validate_page_size(self):
        with pytest.raises(ValueError, match="page_size"):
            FaunaConfig(secret="s", page_size=0).validate()


class TestLoadFaunaConfig:
    """Tests for load_fauna_config."""

    def test_reads_explicit_env_mapping(self):
        env = {
            "FAUNADB_SECRET_KEY": "s3cret",
            "FAUNADB_DOMAIN": "localhost",
            "FAUNADB_SCHEME": "http",
            "FAUNADB_PORT": "8443",
            "FAUNADB_TIMEOUT": "30",
            "FAUNADB_PAGE_SIZE": "16",
        }

        config = load_fauna_config(env=env)

        assert config == FaunaConfig(
            secret="s3cret",
            domain="localhost",
            scheme="http",
            port=8443,
            timeout=30,
            page_size=16,
        )

    def test_empty_values_are_unset(self):
        config = load_fauna_config(env={"FAUNADB_SECRET_KEY": "s", "FAUNADB_DOMAIN": ""})

        assert config.domain is None
        assert config.page_size == 64

    def test_invalid_integer(self):
        with pytest.raises(ValueError, match="FAUNADB_PORT must be an integer"):
            load_fauna_config(env={"FAUNADB_PORT": "https"})

    def test_reads_os_environ(self, clean_env):
        clean_env.setenv("FAUNADB_SECRET_KEY", "from-env")

        config = load_fauna_config(load_env_file=False)

        assert config.secret == "from-env"

    def test_loads_dotenv_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("FAUNADB_SECRET_KEY=from-file\nFAUNADB_PAGE_SIZE=8\n")

        config = load_fauna_config(dotenv_path=str(env_file))

        assert config.secret == "from-file"
        assert config.page_size == 8

    def test_environment_wins_over_dotenv_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("FAUNADB_SECRET_KEY=from-file\n")
        clean_env.setenv("FAUNADB_SECRET_KEY", "from-env")

        config = load_fauna_config(dotenv_path=str(env_file))

        assert config.secret == "from-env"
