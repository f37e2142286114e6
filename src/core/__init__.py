"""
Core Business Logic
===================

Slide rendering pipeline and its error taxonomy.

Components:
- exceptions: Rendering error hierarchy
- rendering: Templates, variable injection, browser sessions and batching
"""
