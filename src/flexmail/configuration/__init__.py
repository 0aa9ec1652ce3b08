"""Integration settings module."""
