"""
Template Store
==============

Read-only access to layout templates kept on disk, one file per style key.
"""

from typing import Dict, List, Optional, Any
from pathlib import Path
import re

from src.config.logging import get_logger
from src.config.settings import get_settings
from src.core.exceptions import TemplateNotFound

logger = get_logger(__name__)

# Style keys are bare file names; anything else could escape the directory.
STYLE_KEY_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class TemplateStore:
    """Loads layout template markup by style key."""

    def __init__(self, templates_path: Path, suffix: str = ".html", cache: bool = True):
        self.templates_path = Path(templates_path)
        self.suffix = suffix
        self.cache_enabled = cache
        self._cache: Dict[str, str] = {}
        self.logger: Any = logger.bind(component="template_store")

    def template_path(self, style_key: str) -> Path:
        return self.templates_path / f"{style_key}{self.suffix}"

    def load(self, style_key: str) -> str:
        """
        Load the markup of a layout template.

        Args:
            style_key: Layout style identifier (file base name)

        Returns:
            Template markup text

        Raises:
            TemplateNotFound: If no template is stored under the key
        """
        if not isinstance(style_key, str) or not STYLE_KEY_PATTERN.fullmatch(style_key):
            self.logger.warning("Rejected layout style key", style_key=style_key)
            raise TemplateNotFound(str(style_key))

        if self.cache_enabled and style_key in self._cache:
            return self._cache[style_key]

        path = self.template_path(style_key)
        if not path.is_file():
            self.logger.warning("Template not found", style_key=style_key, path=str(path))
            raise TemplateNotFound(style_key)

        markup = path.read_text(encoding="utf-8")
        self.logger.debug("Template loaded", style_key=style_key, size=len(markup))

        if self.cache_enabled:
            self._cache[style_key] = markup
        return markup

    def list_available_styles(self) -> List[str]:
        """List the style keys of all stored templates."""
        if not self.templates_path.is_dir():
            return []
        styles = (
            path.name[: -len(self.suffix)]
            for path in self.templates_path.iterdir()
            if path.is_file() and path.name.endswith(self.suffix)
        )
        return sorted(style for style in styles if STYLE_KEY_PATTERN.fullmatch(style))

    def clear_cache(self) -> None:
        self._cache.clear()


def get_template_store(templates_path: Optional[Path] = None) -> TemplateStore:
    """Build a template store from application settings."""
    settings = get_settings()
    return TemplateStore(
        templates_path or settings.templates_path,
        suffix=settings.template_suffix,
        cache=settings.cache_templates,
    )
