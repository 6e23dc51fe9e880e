"""
fix_karachi.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation (request id, language) for consistent log enrichment.
"""

# Package marker.
