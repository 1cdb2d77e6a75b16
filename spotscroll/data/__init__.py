"""Data acquisition."""
