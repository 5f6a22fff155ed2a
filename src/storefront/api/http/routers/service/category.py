"""Category API router."""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.storefront.api.http.deps import get_db_session
from src.storefront.entities.service.category import Category, CategoryRepository

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[Category])
def list_categories(session: Session = Depends(get_db_session)) -> list[Category]:
    """List all categories by name."""
    try:
        return CategoryRepository(session).list_all()
    except SQLAlchemyError as e:
        logger.exception("GET /api/categories error")
        raise HTTPException(status_code=500, detail="Internal server error") from e
