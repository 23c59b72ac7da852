"""Desktop entry adapters."""
