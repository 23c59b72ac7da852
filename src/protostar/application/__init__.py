"""Application layer wiring."""
