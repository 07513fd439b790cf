"""Validation support."""
