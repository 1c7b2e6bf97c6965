"""Barcode lookup against a small fixed product catalog.

There is no product database behind the scanner: a known barcode resolves
to its catalog entry, anything else to a random catalog product.
"""

import random

from dealfeed.schemas import ScannedProduct

CATALOG: dict[str, ScannedProduct] = {
    p.barcode: p
    for p in (
        ScannedProduct(barcode="123456789", name="Organic Bananas", price="$2.99", category="Produce"),
        ScannedProduct(barcode="987654321", name="Whole Milk", price="$3.49", category="Dairy"),
        ScannedProduct(barcode="456789123", name="Whole Wheat Bread", price="$2.29", category="Bakery"),
        ScannedProduct(barcode="321654987", name="Ground Beef", price="$5.99", category="Meat"),
        ScannedProduct(barcode="654321098", name="Frozen Pizza", price="$4.49", category="Frozen"),
    )
}


def scan_barcode(barcode: str | None = None, rng: random.Random | None = None) -> ScannedProduct:
    """Resolve a scanned barcode to a product.

    Args:
        barcode: Scanned code, if the client decoded one.
        rng: Random source for unknown codes (tests pass a seeded one).

    Returns:
        Matching catalog product, or a random one.
    """
    if barcode and barcode in CATALOG:
        return CATALOG[barcode]
    return (rng or random).choice(list(CATALOG.values()))
