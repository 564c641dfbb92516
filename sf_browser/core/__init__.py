"""Paths, preferences, lookup tables and threshold helpers."""
