"""Test package for the Google Drive app."""
