from fastapi import APIRouter

from infrastructure.services import LocaleCatalogDep, SettingsDep, TranslatorDep

router = APIRouter(tags=["System"])


@router.get("/version")
def get_version(settings: SettingsDep):
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
def get_health():
    """Healthcheck endpoint."""
    return {"status": "ok"}


@router.get("/locales")
def get_locales(catalog: LocaleCatalogDep, translator: TranslatorDep):
    """Available locales and the one negotiated for this request."""
    return {
        "default": catalog.default_locale.tag,
        "available": [locale.tag for locale in catalog.available_locales],
        "current": translator.current_locale().tag,
    }
