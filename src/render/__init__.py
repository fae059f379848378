"""Radar renderers.

Renderers consume finished radars. The JSON renderer exports the
aggregate for a separate drawing front end.
"""
