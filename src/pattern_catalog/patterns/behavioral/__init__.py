"""Behavioral pattern demos."""
