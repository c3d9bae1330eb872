"""Shared infrastructure: database, security, monitoring."""
