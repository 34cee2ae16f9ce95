"""Helpers for lists, numbers, strings, timing, retries, debouncing and throttling."""

__version__ = "0.1.0"