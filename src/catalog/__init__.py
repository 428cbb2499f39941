"""Catalog service.

An in-memory product catalog with a result-typed store and a thin FastAPI
layer on top of it.
"""

__version__ = "0.1.0"
