"""
File Manager Module

Manages the output directory the rendered posts page is written to.
The page file plays the role of the posts container: it is replaced
wholesale after every successful fetch.
"""

import logging
from pathlib import Path
from typing import Optional

from ..config import config


logger = logging.getLogger(__name__)


class FileManager:
    """
    Manager for writing the rendered page.
    """

    def __init__(self, output_dir: Optional[Path] = None):
        """
        Initialize the file manager.

        Args:
            output_dir: Directory for the page (uses config default if None).
        """
        self.output_dir = Path(output_dir) if output_dir else config.file.output_directory
        logger.info(f"FileManager initialized (output: {self.output_dir})")

    def ensure_output_directory(self) -> Path:
        """
        Ensure the output directory exists.

        Creates the directory if it doesn't exist.

        Returns:
            Path to the output directory.
        """
        if not self.output_dir.exists():
            logger.info(f"Creating output directory: {self.output_dir}")
            self.output_dir.mkdir(parents=True, exist_ok=True)
        else:
            logger.debug(f"Output directory exists: {self.output_dir}")

        return self.output_dir

    def get_page_path(self) -> Path:
        """Get the full path of the rendered page."""
        return self.output_dir / config.file.page_filename

    def write_page(self, html: str) -> Path:
        """
        Write the rendered page, replacing any previous version.

        Args:
            html: Full HTML document.

        Returns:
            Path the page was written to.
        """
        self.ensure_output_directory()
        page_path = self.get_page_path()
        page_path.write_text(html, encoding="utf-8")
        logger.info(f"Page written: {page_path} ({len(html)} chars)")
        return page_path

    def page_exists(self) -> bool:
        return self.get_page_path().exists()

    def read_page(self) -> Optional[str]:
        """
        Read the last written page.

        Returns:
            Page contents, or None if no page has been written yet.
        """
        page_path = self.get_page_path()
        if not page_path.exists():
            return None
        return page_path.read_text(encoding="utf-8")

    def get_summary(self) -> dict:
        """
        Get a summary of the file manager state.

        Returns:
            Dictionary with output directory and page info.
        """
        return {
            "output_directory": str(self.output_dir),
            "directory_exists": self.output_dir.exists(),
            "page_path": str(self.get_page_path()),
            "page_exists": self.page_exists(),
        }
