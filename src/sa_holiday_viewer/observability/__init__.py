"""
sa_holiday_viewer.observability

Observability package.

Responsibilities:
- Structured logging configuration with id-number masking.
- Request context propagation for consistent log enrichment.
"""

# Package marker.
