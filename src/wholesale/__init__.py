"""Wholesale cart service."""
