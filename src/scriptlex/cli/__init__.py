"""
scriptlex Command-Line Interface
================================

- **scriptlex**: scan a script (or interactive input) and print its tokens

Implemented as a Click-based CLI application.
"""

__all__ = ["scan"]
