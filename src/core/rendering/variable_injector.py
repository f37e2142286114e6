"""
Variable Injector
=================

Fill layout template markup with slide data.

Templates use two constructs:

- ``{{field}}`` placeholders, replaced everywhere with the field's value or
  its default. Values are inserted as literal text with no HTML escaping;
  templates and slide data are trusted and several fields carry markup.
- ``{{#if field}}...{{/if}}`` blocks, kept when the field's resolved value is
  truthy and dropped otherwise. Blocks do not nest.

The markup is scanned once, left to right, so text that came from a value is
never scanned again: a heading that looks like a placeholder or a block
marker is emitted as-is.
"""

from typing import Any, Dict, Mapping, Optional
import re

# Recognized fields and their defaults. background must precede background_color.
TEMPLATE_FIELDS: Dict[str, Any] = {
    # Content fields
    "heading": "",
    "body_text": "",
    "image_url": "",
    "logo_url": "",
    "slide_number": "",
    "total_slides": "",
    "profile_handle": "",
    "label_text": "",
    "swipe_text": "",
    "cta_text": "Saiba Mais",
    # Style fields
    "background": "#FFFFFF",
    "background_color": None,  # falls back to the resolved background
    "text_color_primary": "#1A1A1A",
    "text_color_secondary": "#666666",
    "accent_color": "#3B82F6",
    "font_heading": "Inter",
    "font_body": "Inter",
    "heading_size": "2.5rem",
    "body_size": "1.2rem",
    "border_radius": "12px",
    "shadow": "none",
    "spacing_unit": "24px",
    "overlay_opacity": 0.5,
    "text_alignment": "center",
}

TEMPLATE_TOKEN_PATTERN = re.compile(
    r"\{\{#if (?P<block_field>\w+)\}\}(?P<block_body>.*?)\{\{/if\}\}"
    r"|(?P<stray_marker>\{\{#if \w+\}\}|\{\{/if\}\})"
    r"|\{\{(?P<field>\w+)\}\}",
    re.DOTALL,
)

ZERO_PATTERN = re.compile(r"^\s*[+-]?(0+(\.0*)?|\.0+)\s*$")


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def resolve_fields(slide_data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Resolve every recognized field to its value or its default.

    A value counts as given when it is present, not None and not the empty
    string. Unrecognized fields are ignored.

    Args:
        slide_data: Slide data mapping

    Returns:
        Mapping of every recognized field name to its resolved value
    """
    data = slide_data or {}
    resolved: Dict[str, Any] = {}
    for name, default in TEMPLATE_FIELDS.items():
        value = data.get(name)
        if not _is_empty(value):
            resolved[name] = value
        elif name == "background_color":
            resolved[name] = resolved["background"]
        else:
            resolved[name] = default
    return resolved


def format_value(value: Any) -> str:
    """Render a resolved value as literal template text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(item) for item in value)
    return str(value)


def is_truthy(value: Any) -> bool:
    """
    Truthiness of a field for conditional blocks.

    Falsy: None, the empty string, numeric zero and string forms of zero.
    Every other value is truthy, including the string "false".
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value != "" and not ZERO_PATTERN.match(value)
    return True


def inject(markup: str, slide_data: Optional[Mapping[str, Any]]) -> str:
    """
    Fill template markup with slide data.

    Args:
        markup: Layout template markup
        slide_data: Slide data mapping

    Returns:
        Filled markup
    """
    fields = resolve_fields(slide_data)

    def replace(match: "re.Match[str]") -> str:
        block_field = match.group("block_field")
        if block_field is not None:
            if block_field in fields and is_truthy(fields[block_field]):
                # The body cannot hold a whole block, only stray markers and placeholders.
                return TEMPLATE_TOKEN_PATTERN.sub(replace, match.group("block_body"))
            return ""
        if match.group("stray_marker") is not None:
            return ""
        name = match.group("field")
        if name not in fields:
            return match.group(0)
        return format_value(fields[name])

    return TEMPLATE_TOKEN_PATTERN.sub(replace, markup)
