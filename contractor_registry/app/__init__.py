"""
Application package initializer.

The project is organised into small pieces: ``core`` holds settings,
logging, exceptions and slot storage; ``schemas`` the pydantic models;
``services`` the contractor store, list projection and CSV export;
and ``api`` the versioned HTTP routes.
"""

from .main import app  # noqa: F401
