"""
Light-aware routing HTTP API.
"""
