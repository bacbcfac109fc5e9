"""Utility helpers for the weighted graph library."""
