"""
Test Data
=========

Sample layout templates and slide data used across the test suite.
"""
