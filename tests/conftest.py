import json

import pytest


def variant_line(quantity, tiers=None, variant_id="gid://shopify/ProductVariant/1"):
    """Host-shaped cart line; tiers may be a list (encoded to JSON) or raw text."""
    product = {"volumeDiscount": None}
    if tiers is not None:
        value = tiers if isinstance(tiers, str) else json.dumps(tiers)
        product["volumeDiscount"] = {
            "reference": {"__typename": "Metaobject", "tiers": {"value": value}},
        }
    return {
        "quantity": quantity,
        "merchandise": {"__typename": "ProductVariant", "id": variant_id, "product": product},
    }


@pytest.fixture
def schedule():
    return [
        {"qty": 5, "discount": 10, "label": "10% off 5+"},
        {"qty": 10, "discount": 20, "label": "20% off 10+"},
    ]
