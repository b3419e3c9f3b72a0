"""
Tests for File Manager and Configuration

Tests for page output and configuration overrides.
"""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from posts_client.config import Config, config
from posts_client.files.manager import FileManager


class TestFileManager:
    """Tests for file manager functionality."""

    def test_initialization(self, file_manager, tmp_path):
        """Test that file manager uses the given directory."""
        assert file_manager.output_dir == tmp_path / "output"

    def test_default_directory(self):
        assert FileManager().output_dir == config.file.output_directory

    def test_get_page_path(self, file_manager):
        path = file_manager.get_page_path()

        assert path.name == config.file.page_filename
        assert path.parent == file_manager.output_dir

    def test_ensure_output_directory(self, file_manager):
        assert not file_manager.output_dir.exists()

        file_manager.ensure_output_directory()

        assert file_manager.output_dir.is_dir()

    def test_write_and_read_page(self, file_manager):
        assert file_manager.read_page() is None

        path = file_manager.write_page("<p>café</p>")

        assert path == file_manager.get_page_path()
        assert file_manager.page_exists()
        assert file_manager.read_page() == "<p>café</p>"

    def test_write_replaces_previous_page(self, file_manager):
        file_manager.write_page("first")
        file_manager.write_page("second")

        assert file_manager.read_page() == "second"

    def test_summary(self, file_manager):
        """Test getting manager summary."""
        summary = file_manager.get_summary()

        assert summary["output_directory"] == str(file_manager.output_dir)
        assert summary["directory_exists"] is False
        assert summary["page_exists"] is False


class TestConfig:
    """Tests for configuration defaults and environment overrides."""

    def test_defaults(self):
        cfg = Config()

        assert cfg.api.base_url == "http://localhost:3000"
        assert cfg.api.posts_endpoint == "/posts"
        assert cfg.api.comments_endpoint == "/comments"
        assert cfg.file.page_path == Path("output") / "index.html"
        assert cfg.log.log_file_path == Path("logs") / "posts_client.log"

    def test_env_overrides(self):
        cfg = Config().apply_env({
            "POSTS_CLIENT_BASE_URL": "http://api.example:8080/",
            "POSTS_CLIENT_TIMEOUT": "2.5",
            "POSTS_CLIENT_OUTPUT_DIR": "/tmp/page",
            "POSTS_CLIENT_LOG_LEVEL": "debug",
        })

        assert cfg.api.base_url == "http://api.example:8080"
        assert cfg.api.timeout_seconds == 2.5
        assert cfg.file.output_directory == Path("/tmp/page")
        assert cfg.log.log_level == "DEBUG"

    def test_invalid_env_values_keep_defaults(self):
        """Test that unparsable overrides are ignored instead of failing import."""
        cfg = Config().apply_env({
            "POSTS_CLIENT_TIMEOUT": "abc",
            "POSTS_CLIENT_LOG_LEVEL": "loud",
        })

        assert cfg.api.timeout_seconds == Config().api.timeout_seconds
        assert cfg.log.log_level == Config().log.log_level

    def test_setup_logging_with_unknown_level(self):
        import logging
        from posts_client.main import setup_logging

        logger = setup_logging("loud", log_to_file=False)

        assert logger.handlers[0].level == logging.INFO

    def test_empty_env_keeps_defaults(self):
        assert Config().apply_env({}) == Config()


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
