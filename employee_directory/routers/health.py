from __future__ import annotations

from fastapi import APIRouter

from employee_directory.settings import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    # Only checks that credentials are present; the store itself is not called.
    configured = get_settings().record_store_config() is not None
    return {"status": "ok", "record_store": "configured" if configured else "not_configured"}
