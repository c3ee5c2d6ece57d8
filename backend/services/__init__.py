"""
Infrastructure for the Snake engine: tick timer and render adapters.
"""
