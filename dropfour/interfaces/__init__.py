"""
dropfour.interfaces - Front ends for the dropfour engine

This package contains the command-line tools that drive the engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
