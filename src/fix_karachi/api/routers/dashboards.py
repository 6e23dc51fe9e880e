"""
fix_karachi.api.routers.dashboards

Role-gated dashboards.

Responsibilities:
- Citizen dashboard: display name, eco points, report count, alerts.
- Admin dashboard: report verification and alert overview.
- Access to both is decided by the session/role guard (`api.access.require_screen`).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from fix_karachi.api.deps import backend_client, language_dep
from fix_karachi.api.templating import render
from fix_karachi.api.access import require_screen
from fix_karachi.auth.guard import DASHBOARD_PATHS
from fix_karachi.auth.models import Principal, Role
from fix_karachi.backend.models import Profile
from fix_karachi.backend.protocol import BackendClient
from fix_karachi.backend.results import NotFound, Ok, ProviderError
from fix_karachi.i18n.context import LanguageContext
from fix_karachi.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(tags=["dashboards"])


@router.get(DASHBOARD_PATHS[Role.citizen])
async def citizen_dashboard(
    request: Request,
    principal: Principal = Depends(require_screen(Role.citizen)),
    backend: BackendClient = Depends(backend_client),
    language: LanguageContext = Depends(language_dep),
) -> Response:
    profile: Profile | None = None
    match await backend.query_profile(principal.id):
        case Ok(value=found):
            profile = found
        case NotFound():
            log.info("dashboard.profile_missing", principal_id=principal.id)
        case ProviderError(detail=detail):
            # The dashboard still renders, with zeroed counters.
            log.warning("backend.provider_error", op="query_profile", detail=detail)

    display_name = (profile.name if profile else "") or language.t("dashboard.defaultCitizenName")
    return render(
        request,
        "citizen_dashboard.html",
        {
            "principal": principal,
            "display_name": display_name,
            "points": profile.points if profile else 0,
            "total_reports": profile.total_reports if profile else 0,
            "active_alerts": 0,
        },
    )


@router.get(DASHBOARD_PATHS[Role.admin])
async def admin_dashboard(
    request: Request,
    principal: Principal = Depends(require_screen(Role.admin)),
) -> Response:
    # Counters are placeholders until reports and alerts are stored by the provider.
    stats = {
        "pending_reports": 0,
        "verified_reports": 0,
        "total_users": 0,
        "active_alerts": 0,
    }
    return render(request, "admin_dashboard.html", {"principal": principal, "stats": stats})
