"""Utility helpers: configuration, logging, responses and markdown."""
