"""Kickstart service: user CRUD with keyset pagination."""

__version__ = "0.1.0"
