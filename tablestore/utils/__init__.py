"""Utilities package.

Event and logging infrastructure shared by the store.
"""
