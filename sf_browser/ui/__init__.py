"""Tk user interface."""
