"""
Core package - shared utilities with no service or storage dependencies.
"""
