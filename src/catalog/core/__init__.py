"""Core building blocks shared by the catalog store and its adapters."""

from .result import Failure, Result, Success, describe, summarize

__all__ = ["Failure", "Result", "Success", "describe", "summarize"]
