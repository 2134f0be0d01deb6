"""Deterministic rendering of task documents."""
