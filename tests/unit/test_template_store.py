"""
Unit Tests for Template Store
=============================
"""

from pathlib import Path

import pytest

from src.core.exceptions import TemplateNotFound
from src.core.rendering.template_store import TemplateStore, get_template_store
from src.config.settings import DEFAULT_TEMPLATES_PATH

from tests.data.sample_templates import CENTERED_TEMPLATE


class TestTemplateStore:
    """Test template lookup and listing."""

    def test_load_existing_template(self, template_store: TemplateStore):
        assert template_store.load("centered") == CENTERED_TEMPLATE

    def test_load_missing_template(self, template_store: TemplateStore):
        with pytest.raises(TemplateNotFound, match="Template not found: missing") as exc_info:
            template_store.load("missing")
        assert exc_info.value.style_key == "missing"

    @pytest.mark.parametrize("style_key", ["../centered", "a/b", "", "centered.html"])
    def test_rejects_non_plain_keys(self, template_store: TemplateStore, style_key: str):
        with pytest.raises(TemplateNotFound):
            template_store.load(style_key)

    def test_list_available_styles(self, template_store: TemplateStore):
        assert template_store.list_available_styles() == ["centered", "quote"]

    def test_list_skips_unloadable_names(self, templates_dir: Path):
        (templates_dir / "my style.html").write_text("<p></p>", encoding="utf-8")
        (templates_dir / ".html").write_text("<p></p>", encoding="utf-8")
        store = TemplateStore(templates_dir)

        assert store.list_available_styles() == ["centered", "quote"]
        with pytest.raises(TemplateNotFound):
            store.load("my style")

    def test_list_missing_directory(self, tmp_path: Path):
        assert TemplateStore(tmp_path / "nowhere").list_available_styles() == []

    def test_cache_serves_loaded_content(self, templates_dir: Path):
        store = TemplateStore(templates_dir, cache=True)
        store.load("quote")
        (templates_dir / "quote.html").write_text("changed", encoding="utf-8")
        assert store.load("quote") != "changed"

        store.clear_cache()
        assert store.load("quote") == "changed"

    def test_without_cache_reads_current_content(self, templates_dir: Path):
        store = TemplateStore(templates_dir, cache=False)
        store.load("quote")
        (templates_dir / "quote.html").write_text("changed", encoding="utf-8")
        assert store.load("quote") == "changed"

    def test_bundled_templates(self):
        store = get_template_store(DEFAULT_TEMPLATES_PATH)
        styles = store.list_available_styles()
        assert {"centered", "split_image", "quote", "cta"} <= set(styles)
        assert "{{heading}}" in store.load("centered")
