"""Core: configuration, domain, errors and services.

The core knows nothing about the terminal; rendering lives in `cli`.
"""
