"""Adapters: concrete I/O (HTTP) behind the core contracts."""
