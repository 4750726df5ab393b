"""Tiered English vocabulary quiz."""

__version__ = "0.1.0"
