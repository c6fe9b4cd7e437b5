from typing import Final

DATE_FORMAT: Final[str] = "%d-%m-%Y"
DAYS_BEFORE_EXPIRY: Final[int] = 5
LOW_STOCK_THRESHOLD: Final[dict[str, float]] = {
    "kg": 0.2,
    "liters": 0.3,
    "litres": 0.3,
    "pieces": 2,
    "cups": 0.5,
}
SMOOTHIE_KEYWORDS: Final[tuple[str, ...]] = ("smoothie", "milkshake")
SMOOTHIE_SHELF_LIFE_DAYS: Final[int] = 14
SMOOTHIE_PROCEDURE: Final[str] = "Blend all ingredients."
CURRENCY: Final[str] = "NOK"
# Quantities closer than this are treated as equal
QUANTITY_TOLERANCE: Final[float] = 1e-9
