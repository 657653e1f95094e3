"""Rapport: private customer relationship tracking service."""

__version__ = "0.1.0"
