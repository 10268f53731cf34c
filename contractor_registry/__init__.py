"""
Top‑level package for the Contractor Registry.

All functionality lives in submodules under ``app``: the contractor
store, the derived list views, CSV export and the HTTP API.
"""

__all__ = []
