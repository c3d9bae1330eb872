"""Job postings domain."""
