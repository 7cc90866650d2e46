"""Concrete tag storage adapters."""
