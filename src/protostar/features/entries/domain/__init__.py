"""Desktop entry domain types."""
