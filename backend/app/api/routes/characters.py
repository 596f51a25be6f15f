"""Characters Routes — pass-through proxy to the Rick and Morty characters API.

Invariants:
    - Response body is exactly what the upstream API returned
    - Upstream failures surface with the upstream status (UpstreamAPIError)
"""

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_characters_client
from app.infrastructure.characters_client import CharactersClient

router = APIRouter(prefix="/characters", tags=["Characters"])


@router.get("", summary="List characters from the Rick and Morty API")
async def list_characters(
    page: int | None = Query(None, ge=1),
    name: str | None = None,
    status: str | None = None,
    species: str | None = None,
    type: str | None = None,
    gender: str | None = None,
    client: CharactersClient = Depends(get_characters_client),
):
    return await client.list_characters(
        page=page, name=name, status=status,
        species=species, type=type, gender=gender,
    )
