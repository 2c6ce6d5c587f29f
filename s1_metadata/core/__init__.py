"""Core utilities and shared infrastructure.

- config: Extraction settings loaded from the environment
- constants: Named constants for the Sentinel-1 product schemas
- exceptions: Shared exception hierarchy
"""
