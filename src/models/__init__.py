"""
Data Models
===========

Pydantic models for render geometry, rendered images and API payloads.
"""
