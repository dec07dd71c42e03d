"""Solutions to classic sorting, array, subarray, text, substring and counting exercises."""

__version__ = "0.1.0"
__all__ = ["arrays", "counting", "sorting", "subarrays", "substrings", "text"]