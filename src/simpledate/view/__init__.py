"""Textual widgets and application."""
