"""Creational pattern demos."""
