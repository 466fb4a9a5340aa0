import secrets

from fastapi import Depends, Header, HTTPException, Query, status

from docx_revisions.core.config import Settings, get_settings


def _keys_match(provided: str | None, expected: str) -> bool:
    if not provided:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


async def verify_api_key(
    x_api_key: str | None = Header(None),
    api_key: str | None = Query(None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Checagem de chave compartilhada: header x-api-key ou query api_key."""
    # Sem chave configurada (ou AUTH_TYPE=none) a API fica aberta
    if settings.AUTH_TYPE == "none" or not settings.API_KEY:
        return

    provided = x_api_key or api_key
    if not _keys_match(provided, settings.API_KEY):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized. Invalid or missing API key.",
        )
