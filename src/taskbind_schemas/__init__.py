"""JSON schemas shipped as taskbind package data."""
