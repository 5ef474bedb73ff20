"""
sa_holiday_viewer.api.routers.internal.systems

Emulated collaborator systems.

Responsibilities:
- Provide the identity decoder and public holiday endpoints the orchestrator calls.
- Keep the service runnable without any external dependency.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Point SAH_COLLABORATOR_BASE_URL at real services to bypass these emulations.
