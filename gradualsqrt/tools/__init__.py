"""Small helpers for presenting generator output."""
