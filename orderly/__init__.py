"""
Orderly

Small CRUD service for the User resource.
"""

__version__ = "0.1.0"
