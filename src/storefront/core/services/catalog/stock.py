from src.storefront.entities.service.product.entity import ProductStatus


def status_for_stock(stock: int) -> ProductStatus:
    """Status a product takes when its stock is set to `stock`."""
    if stock < 0:
        raise ValueError("stock must be a non-negative integer")
    return ProductStatus.OUT_OF_STOCK if stock == 0 else ProductStatus.ACTIVE
