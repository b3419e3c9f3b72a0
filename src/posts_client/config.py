"""
Configuration constants for the Posts Client.

This module centralizes all configurable parameters to make the client
easy to point at a different REST server or output location.
"""

import logging
import os
from pathlib import Path
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)


@dataclass
class APIConfig:
    """API configuration settings."""
    base_url: str = "http://localhost:3000"
    posts_endpoint: str = "/posts"
    comments_endpoint: str = "/comments"
    timeout_seconds: float = 10.0


@dataclass
class RenderConfig:
    """View rendering configuration."""
    page_title: str = "Posts"
    empty_message: str = "No posts yet"
    missing_value: str = "N/A"
    create_label: str = "Create Post"
    update_label: str = "Update Post"


@dataclass
class FileConfig:
    """Rendered page output configuration."""
    output_directory: Path = field(default_factory=lambda: Path("output"))
    page_filename: str = "index.html"

    @property
    def page_path(self) -> Path:
        """Get the full path to the rendered page."""
        return self.output_directory / self.page_filename


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "posts_client.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    file: FileConfig = field(default_factory=FileConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def apply_env(self, environ=None) -> "Config":
        """
        Override settings from POSTS_CLIENT_* environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ).

        Returns:
            This configuration, for chaining.
        """
        environ = os.environ if environ is None else environ

        base_url = environ.get("POSTS_CLIENT_BASE_URL")
        if base_url:
            self.api.base_url = base_url.rstrip("/")

        timeout = environ.get("POSTS_CLIENT_TIMEOUT")
        if timeout:
            try:
                self.api.timeout_seconds = float(timeout)
            except ValueError:
                logger.warning(f"Ignoring invalid POSTS_CLIENT_TIMEOUT: {timeout!r}")

        output_dir = environ.get("POSTS_CLIENT_OUTPUT_DIR")
        if output_dir:
            self.file.output_directory = Path(output_dir)

        log_level = environ.get("POSTS_CLIENT_LOG_LEVEL")
        if log_level:
            if isinstance(logging.getLevelName(log_level.upper()), int):
                self.log.log_level = log_level.upper()
            else:
                logger.warning(f"Ignoring invalid POSTS_CLIENT_LOG_LEVEL: {log_level!r}")

        return self


# Global configuration instance
config = Config().apply_env()
