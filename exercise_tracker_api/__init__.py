"""
Top-level package for the Exercise Tracker API.

Makes ``exercise_tracker_api`` importable so modules under ``app`` can
be referenced by fully qualified names like
``exercise_tracker_api.app.main``.  All functionality lives in
submodules under ``app``.
"""

__all__ = []
