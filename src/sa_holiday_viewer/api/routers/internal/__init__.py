"""
sa_holiday_viewer.api.routers.internal

Internal collaborator API package.

Responsibilities:
- Host emulated collaborator endpoints under `/internal/v1/*`.
"""

# Package marker.
