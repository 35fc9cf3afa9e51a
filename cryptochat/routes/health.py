from fastapi import APIRouter, Depends

from cryptochat.core.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {"ok": True, "app": settings.APP_NAME, "env": settings.ENV}
