"""REST API presentation layer for Userbase.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain exception -> HTTP response
    ├── routers/              # API route handlers
    └── schemas/              # Request/response models
"""
