"""Radar ingest pipeline.

This package validates raw source rows, normalizes them, and
assembles the radar aggregate handed to renderers.
"""
