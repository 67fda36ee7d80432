"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, storage, seeding, rate
limiting), ``schemas``, ``repositories``, ``services`` and ``api``.
"""

from .main import app  # noqa: F401
