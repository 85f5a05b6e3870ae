"""Accusation checks."""
