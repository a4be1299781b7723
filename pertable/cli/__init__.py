"""
Command-line interface for pertable.
"""

__all__ = []
