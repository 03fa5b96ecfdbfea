"""
Gift Shop backend - authenticated gift CRUD over FastAPI and MongoDB.
"""
__version__ = "0.1.0"
