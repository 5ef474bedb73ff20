"""
sa_holiday_viewer.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, and repositories for the search audit trail.
"""

# Package marker.
