"""
Tests for RisPortSettings and the user .env helpers.
"""

import sys

import pytest
from pydantic import ValidationError

from risport70 import RisPortSettings, StripMode
from risport70.core.config import get_user_env_file, write_user_env_vars


class TestRisPortSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, clean_env):
        """Test defaults: port 8443, 8000 ms, TLS verified, ns1: lexical."""
        settings = RisPortSettings(_env_file=None)

        assert settings.host == ""
        assert settings.port == 8443
        assert settings.timeout_ms == 8000
        assert settings.verify_tls is True
        assert settings.namespace_prefix == "ns1:"
        assert settings.strip_mode is StripMode.LEXICAL

    def test_reads_prefixed_env(self, clean_env, monkeypatch):
        """Test RISPORT70_* variables are picked up."""
        monkeypatch.setenv("RISPORT70_HOST", "cucm-pub")
        monkeypatch.setenv("RISPORT70_USER", "axl")
        monkeypatch.setenv("RISPORT70_PASSWORD", "secret")
        monkeypatch.setenv("RISPORT70_TIMEOUT_MS", "2500")
        monkeypatch.setenv("RISPORT70_VERIFY_TLS", "false")
        monkeypatch.setenv("RISPORT70_STRIP_MODE", "structural")

        settings = RisPortSettings(_env_file=None)

        assert (settings.host, settings.user, settings.password) == ("cucm-pub", "axl", "secret")
        assert settings.timeout_ms == 2500
        assert settings.verify_tls is False
        assert settings.strip_mode is StripMode.STRUCTURAL

    def test_reads_legacy_demo_env(self, clean_env, monkeypatch):
        """Test CUCM/UCUSER/UCPASS are accepted."""
        monkeypatch.setenv("CUCM", "198.18.133.3")
        monkeypatch.setenv("UCUSER", "administrator")
        monkeypatch.setenv("UCPASS", "C1sco12345")

        settings = RisPortSettings(_env_file=None)

        assert settings.host == "198.18.133.3"
        assert settings.user == "administrator"
        assert settings.password == "C1sco12345"

    def test_reads_project_env_file(self, clean_env, tmp_path):
        """Test a `.env` in the working directory is read."""
        (tmp_path / ".env").write_text("RISPORT70_HOST=from-dotenv\n", encoding="utf-8")

        settings = RisPortSettings()

        assert settings.host == "from-dotenv"

    def test_rejects_non_positive_timeout(self, clean_env):
        """Test timeout must be > 0."""
        with pytest.raises(ValidationError):
            RisPortSettings(_env_file=None, timeout_ms=0)

    def test_masked_hides_password(self, clean_env):
        """Test the display view never includes the password."""
        settings = RisPortSettings(_env_file=None, host="h", user="u", password="hunter2")

        masked = settings.masked()

        assert masked["password"] == "****"
        assert "hunter2" not in masked.values()


class TestWriteUserEnvVars:
    """Tests for write_user_env_vars()."""

    def test_creates_and_merges(self, tmp_path):
        """Test new keys are added and existing ones kept."""
        env_path = tmp_path / "cfg" / ".env"

        write_user_env_vars({"RISPORT70_HOST": "a", "RISPORT70_USER": "u"}, env_path)
        write_user_env_vars({"RISPORT70_HOST": "b"}, env_path)

        lines = env_path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert "RISPORT70_HOST=b" in lines
        assert "RISPORT70_USER=u" in lines

    def test_keeps_comments_and_unrelated_lines(self, tmp_path):
        """Test updating a key leaves hand-written lines in place."""
        env_path = tmp_path / ".env"
        env_path.write_text("# lab cluster\nOTHER_TOOL_TOKEN=abc\nRISPORT70_HOST=old\n", encoding="utf-8")

        write_user_env_vars({"RISPORT70_HOST": "new", "RISPORT70_USER": None}, env_path)

        lines = env_path.read_text(encoding="utf-8").splitlines()
        assert lines[:3] == ["# lab cluster", "OTHER_TOOL_TOKEN=abc", "RISPORT70_HOST=new"]
        assert not any(line.startswith("RISPORT70_USER") for line in lines)

    @pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout")
    def test_user_env_file_follows_xdg_config_home(self, tmp_path, monkeypatch):
        """Test the user .env lives under $XDG_CONFIG_HOME/risport70."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_user_env_file() == tmp_path / "risport70" / ".env"
