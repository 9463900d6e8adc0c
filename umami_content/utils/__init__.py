"""
Utilities for identifier sanitization and seed data files.
"""
