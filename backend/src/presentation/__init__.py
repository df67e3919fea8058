"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers, request bodies (schemas.py) and response models
- dependencies/: bearer-token resolution into Identity or Guest
"""
