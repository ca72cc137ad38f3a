"""
Service layer abstraction.

Each service wraps the store for one domain and maps stored rows to
the Pydantic schemas returned by the API.
"""
