"""Potato Doc - desktop client for potato leaf disease classification."""

__version__ = "0.1.0"
