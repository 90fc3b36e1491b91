"""Application layer - use cases built on the loan domain."""
