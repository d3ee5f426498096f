"""
Repositories for data persisted in the Apps key/value store.
"""
