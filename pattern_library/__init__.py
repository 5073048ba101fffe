"""
Pattern Library
Serves proven, copy-pasteable code patterns from a directory of markdown files.
"""

__version__ = "1.0.0"
__package_name__ = "pattern-library"
