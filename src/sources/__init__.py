"""Radar data sources.

This package fetches raw tabular data from public sheets, protected
sheets, and CSV files into one common fetch result.
"""
