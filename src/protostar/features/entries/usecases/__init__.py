"""Desktop entry use cases."""
