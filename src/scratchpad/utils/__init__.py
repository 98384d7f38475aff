"""Utility helpers for Scratchpad."""
