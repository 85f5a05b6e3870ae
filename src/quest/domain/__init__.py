"""Enums and exceptions shared across the game."""
