"""Reference image URLs for catalog products, keyed by product slug.

Used as a fallback when a product record has no `image_url` of its own.
"""

PRODUCT_IMAGE_URLS: dict[str, str] = {
    "macbook-pro-14": "https://images.example.com/products/macbook-pro-14.jpg",
    "wireless-mouse": "https://images.example.com/products/wireless-mouse.jpg",
    "mechanical-keyboard": "https://images.example.com/products/mechanical-keyboard.jpg",
    "usb-c-hub": "https://images.example.com/products/usb-c-hub.jpg",
}


def image_url_for(slug: str | None) -> str | None:
    if not slug:
        return None
    return PRODUCT_IMAGE_URLS.get(slug)
