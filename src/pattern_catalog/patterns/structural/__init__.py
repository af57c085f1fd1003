"""Structural pattern demos."""
