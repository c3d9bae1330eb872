"""Job infrastructure layer."""
