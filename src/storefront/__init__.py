"""Storefront API.

Product catalog, review summaries, inventory and checkout served over
FastAPI with SQLModel persistence.
"""

__version__ = "0.1.0"
