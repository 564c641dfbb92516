"""Roster exporters: PNG, CSV and xlsx."""
