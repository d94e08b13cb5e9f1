"""Lotto ticket tracker: recorded entries and the latest official draw."""

__version__ = "0.1.0"
