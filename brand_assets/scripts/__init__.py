"""Standalone entry points for the brand asset tools."""
