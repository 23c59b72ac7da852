"""Feature packages: desktop entries, icons and launching."""
