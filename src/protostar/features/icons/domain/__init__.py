"""Icon domain types."""
