"""Utility helpers package for IDs, JSON I/O and text handling."""
