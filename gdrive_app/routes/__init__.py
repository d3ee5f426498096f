"""Routers for the calls the Apps framework sends to the app."""
