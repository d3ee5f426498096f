"""
Providers for the external services the app talks to.
"""
