"""
Module: test_loader.py
Description: Unit tests for config file reading and merging.

Covers the absent / unreadable / malformed / valid outcomes of reading a
single file and the global-then-project merge order of load_config.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from opencode_event_push.config.loader import (
    global_config_path,
    load_config,
    project_config_path,
    read_config_file,
)
from opencode_event_push.models.target import PluginConfig

GLOBAL_TARGET = {"url": "https://global.example.com/hook"}
PROJECT_TARGET = {"url": "https://project.example.com/hook"}


@pytest.fixture
def mock_logger():
    with patch("opencode_event_push.config.loader.logger") as logger:
        yield logger


class TestReadConfigFile:
    """Test cases for reading a single config file."""

    def test_valid_file(self, tmp_path, write_config, mock_logger):
        path = write_config(tmp_path, {"targets": [{"url": "https://example.com/hook"}]})

        config = read_config_file(path)

        assert config is not None
        assert [t.url for t in config.targets] == ["https://example.com/hook"]
        mock_logger.warning.assert_not_called()

    def test_missing_file_is_absent_and_silent(self, tmp_path, mock_logger):
        assert read_config_file(tmp_path / "missing.json") is None
        mock_logger.warning.assert_not_called()

    def test_unreadable_file_is_absent_with_one_warning(self, tmp_path, write_config, mock_logger):
        path = write_config(tmp_path, {"targets": []})

        with patch.object(Path, "read_text", side_effect=PermissionError("Permission denied")):
            assert read_config_file(path) is None

        assert mock_logger.warning.call_count == 1

    def test_directory_path_is_absent_with_one_warning(self, tmp_path, mock_logger):
        assert read_config_file(tmp_path) is None
        assert mock_logger.warning.call_count == 1

    def test_undecodable_file_is_absent_with_one_warning(self, tmp_path, mock_logger):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\x00garbage")

        assert read_config_file(path) is None
        assert mock_logger.warning.call_count == 1

    def test_malformed_json_is_empty_with_one_warning(self, tmp_path, write_config, mock_logger):
        path = write_config(tmp_path, "not valid json {{{")

        config = read_config_file(path)

        assert config == PluginConfig.empty()
        assert config is not None
        assert mock_logger.warning.call_count == 1

    @pytest.mark.parametrize("document", [
        {"targets": "oops"},
        {"targets": {"url": "https://example.com"}},
        {"other": []},
        [{"url": "https://example.com"}],
    ])
    def test_targets_not_a_list_is_empty_with_one_warning(
        self, tmp_path, write_config, mock_logger, document
    ):
        path = write_config(tmp_path, document)

        assert read_config_file(path) == PluginConfig.empty()
        assert mock_logger.warning.call_count == 1

    @pytest.mark.parametrize("target", [
        {},
        {"url": ""},
        {"url": "https://example.com", "retry": {"attempts": 0}},
        {"url": "https://example.com", "retry": {"delayMs": -1}},
        {"url": "https://example.com", "headers": {"X-Count": 3}},
    ])
    def test_invalid_target_rejects_file_with_one_warning(
        self, tmp_path, write_config, mock_logger, target
    ):
        path = write_config(tmp_path, {"targets": [{"url": "https://ok.example.com"}, target]})

        assert read_config_file(path) == PluginConfig.empty()
        assert mock_logger.warning.call_count == 1

    def test_interpolates_env_tokens(self, tmp_path, write_config):
        path = write_config(tmp_path, {
            "targets": [{
                "url": "{env:HOOK_URL}/events",
                "headers": {"Authorization": "Bearer {env:HOOK_TOKEN}"}
            }]
        })
        environ = {"HOOK_URL": "https://hooks.example.com", "HOOK_TOKEN": "s3cret"}

        config = read_config_file(path, environ)

        target = config.targets[0]
        assert target.url == "https://hooks.example.com/events"
        assert target.headers == {"Authorization": "Bearer s3cret"}

    def test_preserves_target_order_and_fields(self, tmp_path, write_config):
        path = write_config(tmp_path, {
            "targets": [
                {"url": "https://a.example.com", "events": ["session.idle"]},
                {"url": "https://b.example.com", "retry": {"attempts": 5, "delayMs": 100}},
                {"url": "https://c.example.com", "unknownField": True}
            ]
        })

        config = read_config_file(path)

        assert [t.url for t in config.targets] == [
            "https://a.example.com",
            "https://b.example.com",
            "https://c.example.com",
        ]
        assert config.targets[0].events == ("session.idle",)
        assert config.targets[1].retry.attempts == 5
        assert config.targets[1].retry.delay_ms == 100


class TestConfigPaths:
    """Test cases for global and project path resolution."""

    def test_global_path_uses_settings_directory(self, test_settings, tmp_path):
        assert global_config_path(test_settings) == tmp_path / "global" / "opencode-event-push.json"

    def test_global_path_defaults_under_home(self, monkeypatch, tmp_path):
        from opencode_event_push.config.settings import Settings

        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.delenv("EVENT_PUSH_GLOBAL_CONFIG_DIR", raising=False)

        assert global_config_path(Settings()) == (
            tmp_path / ".config" / "opencode" / "opencode-event-push.json"
        )

    def test_project_path(self, test_settings):
        assert project_config_path("/proj", test_settings) == Path("/proj/opencode-event-push.json")


class TestLoadConfig:
    """Test cases for merging global and project configs."""

    def test_merges_global_first(self, test_settings, project_dir, write_config):
        write_config(test_settings.global_config_dir, {"targets": [GLOBAL_TARGET]})
        write_config(project_dir, {"targets": [PROJECT_TARGET]})

        config = load_config(project_dir, settings=test_settings)

        assert [t.url for t in config.targets] == [GLOBAL_TARGET["url"], PROJECT_TARGET["url"]]

    def test_only_project(self, test_settings, project_dir, write_config):
        write_config(project_dir, {"targets": [PROJECT_TARGET]})

        config = load_config(project_dir, settings=test_settings)

        assert [t.url for t in config.targets] == [PROJECT_TARGET["url"]]

    def test_only_global(self, test_settings, project_dir, write_config):
        write_config(test_settings.global_config_dir, {"targets": [GLOBAL_TARGET]})

        config = load_config(project_dir, settings=test_settings)

        assert [t.url for t in config.targets] == [GLOBAL_TARGET["url"]]

    def test_neither_file(self, test_settings, project_dir):
        assert load_config(project_dir, settings=test_settings) == PluginConfig.empty()

    def test_no_directory_and_no_global(self, test_settings):
        assert load_config(None, settings=test_settings).targets == ()

    def test_no_directory_reads_global_only(self, test_settings, write_config):
        write_config(test_settings.global_config_dir, {"targets": [GLOBAL_TARGET]})

        with patch(
            "opencode_event_push.config.loader.read_config_file",
            wraps=read_config_file
        ) as reader:
            config = load_config(None, settings=test_settings)

        assert reader.call_count == 1
        assert [t.url for t in config.targets] == [GLOBAL_TARGET["url"]]

    def test_malformed_project_keeps_global(self, test_settings, project_dir, write_config):
        write_config(test_settings.global_config_dir, {"targets": [GLOBAL_TARGET]})
        write_config(project_dir, "{ broken")

        config = load_config(project_dir, settings=test_settings)

        assert [t.url for t in config.targets] == [GLOBAL_TARGET["url"]]

    def test_env_applied_to_both_files(self, test_settings, project_dir, write_config):
        write_config(test_settings.global_config_dir, {"targets": [{"url": "{env:G}"}]})
        write_config(project_dir, {"targets": [{"url": "{env:P}"}]})

        config = load_config(
            project_dir,
            environ={"G": "https://g.example.com", "P": "https://p.example.com"},
            settings=test_settings
        )

        assert [t.url for t in config.targets] == ["https://g.example.com", "https://p.example.com"]
