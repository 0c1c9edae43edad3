from .formatter import format_approved, format_merged, format_opened
from .dispatcher import MergeRequestDispatcher

__all__ = ["format_approved", "format_merged", "format_opened", "MergeRequestDispatcher"]
