"""Shared kernel: exceptions and infrastructure used across domains."""
