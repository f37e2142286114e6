"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Application settings, render geometry and browser options
- logging: Structured logging configuration
"""
