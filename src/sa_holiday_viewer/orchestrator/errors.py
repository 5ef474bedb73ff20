"""
sa_holiday_viewer.orchestrator.errors

Domain-specific exceptions raised by the search orchestrator.

Responsibilities:
- Signal that a search was refused before any state transition happened.
"""

from __future__ import annotations


class SearchNotAllowed(Exception):
    """
    The candidate id number did not pass validation, so the search affordance is disabled.
    """


class OrchestratorClosed(Exception):
    """
    The owning viewer has been disposed; no further searches are accepted.
    """


# --- Module Notes -----------------------------------------------------------
# The API layer maps SearchNotAllowed to 409 and OrchestratorClosed to 404.
