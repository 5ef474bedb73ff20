"""
sa_holiday_viewer.collaborators

Collaborator client package.

Responsibilities:
- Provide client interfaces for the identity decoder and the holiday lookup system.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The orchestrator should depend on this boundary (not on HTTP or routers directly).
