"""
Top-level package for vc_autocommit.

This package exposes the main CLI entry point via the
``vc_autocommit.cli`` module.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
