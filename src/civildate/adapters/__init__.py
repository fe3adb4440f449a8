"""Integrations of ``Date`` with persistence libraries."""
