"""Utility helpers for the pass calendar exporter."""
