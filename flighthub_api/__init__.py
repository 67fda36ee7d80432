"""
Top-level package for the FlightHub API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
