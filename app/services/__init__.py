"""
Services Layer

Core services hold the table-level CRUD logic used by the API routers.
"""

__all__ = []
