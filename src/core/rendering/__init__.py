"""
Rendering Module
===============

Template filling and PNG capture with browser automation.

Components:
- template_store: Layout template lookup by style key
- variable_injector: Placeholder substitution and conditional blocks
- session_manager: Shared browser session and per-render pages
- slide_renderer: One slide record to one PNG image
- carousel: Ordered batch rendering with position stamping
"""
