"""
Hover routes: /api/hover, /api/symbols, /api/settings
"""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from goexamples.core.index import resolve_package
from goexamples.core.token import Position, split_lines
from goexamples.server.deps import get_index, get_provider


router = APIRouter(prefix="/api", tags=["hover"])


class HoverRequest(BaseModel):
    text: str
    line: int = Field(ge=0)
    character: int = Field(ge=0)
    path: Optional[str] = None  # document path, matched against the provider selector


@router.post("/hover")
async def hover(req: HoverRequest):
    """Hover payload for the token at (line, character), or null."""
    if req.line >= len(split_lines(req.text)):
        raise HTTPException(status_code=422, detail=f"Line {req.line} is outside the document")

    provider = get_provider(req.path)
    if provider is None:
        return {"hover": None}

    result = await provider.provide_hover(req.text, Position(req.line, req.character))

    return {"hover": result.to_dict() if result else None}


@router.get("/symbols/{symbol}")
async def get_symbol(symbol: str):
    """Look up a symbol in the index."""
    index = get_index()
    qualified = index.lookup(symbol)
    if qualified is None:
        raise HTTPException(status_code=404, detail="Symbol not found")

    return {
        "symbol": symbol,
        "qualified_name": qualified,
        "package": resolve_package(symbol, index),
    }


@router.get("/settings")
async def get_settings():
    """Settings the hover provider is using."""
    return get_provider().settings.to_dict()
