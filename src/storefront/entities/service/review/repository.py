from sqlmodel import Session, col, select

from src.storefront.entities.service.review.entity import Review
from src.storefront.entities.service.review.table import ReviewTable


class ReviewRepository:
    """Data-access layer for product reviews."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_for_product(self, product_id: str) -> list[Review]:
        statement = (
            select(ReviewTable)
            .where(ReviewTable.product_id == product_id)
            .order_by(col(ReviewTable.created_at).desc())
        )
        return [
            Review.model_validate(row, from_attributes=True)
            for row in self._session.exec(statement)
        ]

    def ratings_for_product(self, product_id: str) -> list[int]:
        statement = select(ReviewTable.rating).where(ReviewTable.product_id == product_id)
        return list(self._session.exec(statement))

    def create(self, review: Review) -> Review:
        row = ReviewTable.model_validate(review.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Review.model_validate(row, from_attributes=True)
