"""
API package - request/response contracts and global middleware.

This package provides:
- Pydantic param and response models (api.contracts)
- Global middleware (request context, error envelope)
"""
