"""Health check endpoint router."""

import platform
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Depends

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.deps import get_app_dependencies

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, Any]:
    """Liveness probe: 200 OK as long as the process is serving requests.

    Reports runtime and uptime information only; the product store is not
    consulted.
    """
    now = datetime.now(UTC)
    return {
        "status": "UP",
        "pythonVersion": platform.python_version(),
        "timestamp": now.isoformat(),
        "uptimeSeconds": round((now - app_deps.started_at).total_seconds(), 3),
        "application": app_deps.config.app.name,
        "environment": app_deps.config.app.environment,
    }
