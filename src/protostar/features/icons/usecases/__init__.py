"""Icon resolution use cases."""
