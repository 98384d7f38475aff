"""Data models exchanged between the core and the interfaces."""

from .io import ComparisonLine, ComparisonReport, DivisionResult

__all__ = ["ComparisonLine", "ComparisonReport", "DivisionResult"]
