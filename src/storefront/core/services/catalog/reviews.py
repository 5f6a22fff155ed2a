"""Review aggregation for product pages."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from src.storefront.entities.service.product.schemas import ReviewSummary

STAR_RATINGS = range(1, 6)


def summarize_reviews(ratings: Iterable[int]) -> ReviewSummary:
    """Average, count and per-star distribution of a product's ratings.

    The average is rounded half up to one decimal and is 0 without reviews.
    Ratings outside 1-5 count toward the average but fall in no bucket.
    """
    ratings = list(ratings)
    distribution = {str(star): 0 for star in STAR_RATINGS}
    for rating in ratings:
        key = str(rating)
        if key in distribution:
            distribution[key] += 1

    if not ratings:
        return ReviewSummary(average=0, count=0, distribution=distribution)

    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    average = float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    return ReviewSummary(average=average, count=len(ratings), distribution=distribution)
