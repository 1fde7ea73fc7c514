"""Diffstat reporters."""
