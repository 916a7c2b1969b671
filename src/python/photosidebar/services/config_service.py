"""
Configuration service implementation for Photo Sidebar.
Persists the small gallery settings record as JSON.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from ..core.models import GallerySettings

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and saving gallery settings."""

    def __init__(self, config_file: str = None):
        self.config_file = config_file or self._get_default_config_path()
        self.settings: Dict[str, Any] = {}
        self._load_settings()

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        config_dir = Path.home() / ".config"
        if not config_dir.exists():
            config_dir = Path.home()

        return str(config_dir / "photosidebar" / "settings.json")

    def _load_settings(self):
        """Load settings from the configuration file."""
        try:
            if os.path.exists(self.config_file):
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                self.settings = data if isinstance(data, dict) else {}
        except (OSError, ValueError) as e:
            logger.warning("Could not load settings from %s: %s", self.config_file, e)
            self.settings = {}

    def _save_settings(self):
        """Save settings to the configuration file."""
        try:
            config_path = Path(self.config_file)
            config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=2)
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", self.config_file, e)

    def load_gallery_settings(self) -> GallerySettings:
        """Stored gallery settings with defaults merged in."""
        return GallerySettings.from_dict(self.settings)

    def save_gallery_settings(self, settings: GallerySettings):
        """Replace the stored gallery settings and save them in full."""
        self.settings.update(settings.to_dict())
        self._save_settings()
