"""
sa_holiday_viewer.services

Service-layer package.

Responsibilities:
- Own viewer session lifetimes and persistence decisions.
- Bridge the API layer to the viewer component and orchestrator.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake backends/sessions.
