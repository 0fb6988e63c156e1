"""Buzzword pack listing."""

from __future__ import annotations

from fastapi import APIRouter

from meeting_bingo.data.categories import list_categories
from meeting_bingo.models.category import CategorySummary

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("/", response_model=list[CategorySummary])
async def categories():
    """List every shipped buzzword pack."""
    return [CategorySummary.from_category(c) for c in list_categories()]
