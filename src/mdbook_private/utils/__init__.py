"""Utility helpers for mdbook-private."""
