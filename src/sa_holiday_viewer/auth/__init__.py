"""
sa_holiday_viewer.auth

Authentication/authorization package.

Responsibilities:
- JWT helpers for service-to-service calls.
- FastAPI auth dependencies (Principal + RBAC) for the collaborator routes.
"""

# Package marker.
