"""
Application package initializer.

The API is split into ``core`` (configuration, logging, storage and
input parsing), ``schemas`` (request/response models), ``services``
(business logic over the store) and ``api`` (HTTP endpoints).
"""

from .main import app  # noqa: F401
