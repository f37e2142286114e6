"""
API Routes
==========

Health and rendering endpoints.
"""
