"""Command line interface for operating the storefront."""

from .main import app

__all__ = ["app"]
