"""Flexmail template tags."""
