"""Synchronous client for the Coze open API: workflow runs and event streams, run histories, templates and users."""

__version__ = "0.1.0"