"""Static catalog reference data used to seed a fresh database."""

DEFAULT_CATEGORIES: list[dict[str, str]] = [
    {"name": "Laptops", "slug": "laptops", "description": "Portable computers"},
    {"name": "Accessories", "slug": "accessories", "description": "Mice, keyboards and hubs"},
    {"name": "Audio", "slug": "audio", "description": "Headphones and speakers"},
]

DEMO_PRODUCTS: list[dict] = [
    {
        "name": "MacBook Pro 14",
        "slug": "macbook-pro-14",
        "description": "14 inch laptop with an M-series chip.",
        "price_cents": 199900,
        "stock": 12,
        "category": "laptops",
    },
    {
        "name": "Wireless Mouse",
        "slug": "wireless-mouse",
        "description": "Ergonomic Bluetooth mouse.",
        "price_cents": 2999,
        "stock": 150,
        "category": "accessories",
    },
    {
        "name": "Mechanical Keyboard",
        "slug": "mechanical-keyboard",
        "description": "Hot-swappable tactile switches.",
        "price_cents": 8999,
        "stock": 0,
        "category": "accessories",
    },
    {
        "name": "USB-C Hub",
        "slug": "usb-c-hub",
        "description": "7-in-1 hub with HDMI and card reader.",
        "price_cents": 3499,
        "stock": 40,
        "category": "accessories",
    },
]
