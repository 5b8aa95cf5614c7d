"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Grid geometry, coordinate bounds, word-list settings
- exceptions: Custom exception hierarchy
"""
