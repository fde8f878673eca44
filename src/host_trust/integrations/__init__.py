"""Integrations with HTTP client libraries."""
