"""Scrolling logic."""
