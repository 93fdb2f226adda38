"""Helpers for Wallarm rule conditions, hint payloads, triggers, scanner scope, users, tenants and rules settings."""

__version__ = "0.1.0"