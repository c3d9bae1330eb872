"""Job application layer."""
