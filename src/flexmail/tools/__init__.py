"""Shared tools."""
