# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.
"""Unit tests for HubSettings configuration."""

from tenant_hub.core.config import HubSettings


class TestHubSettings:
    def test_defaults(self):
        s = HubSettings(_env_file=None)
        assert s.HOST == "0.0.0.0"
        assert s.PORT == 3000
        assert s.LOG_LEVEL == "INFO"
        assert s.ENV == "dev"
        assert s.UPLOADS_DIR == "uploads"
        assert s.IDENTITY_FILE is None
        assert s.json_logs is False

    def test_custom_values(self):
        s = HubSettings(_env_file=None, PORT=8080, ENV="prod", UPLOADS_DIR="/data/uploads")
        assert s.PORT == 8080
        assert s.is_production
        assert s.json_logs is True
        assert s.UPLOADS_DIR == "/data/uploads"

    def test_log_json_override(self):
        s = HubSettings(_env_file=None, ENV="prod", LOG_JSON=False)
        assert s.json_logs is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("HUB_PORT", "9000")
        monkeypatch.setenv("HUB_LOG_LEVEL", "DEBUG")
        s = HubSettings(_env_file=None)
        assert s.PORT == 9000
        assert s.LOG_LEVEL == "DEBUG"
