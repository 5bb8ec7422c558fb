"""Services for agents-link business logic."""

from agents_link.services.reconciler import (
    ReconcilerService,
    get_reconciler_service,
    render_managed_copy,
    strip_managed_header,
)

__all__ = [
    "ReconcilerService",
    "get_reconciler_service",
    "render_managed_copy",
    "strip_managed_header",
]
