"""
Utility functions and helpers.

Modules:
- display: console rendering of translated schemas using rich
"""
