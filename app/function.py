# One call per cart calculation: every line is resolved on its own
from typing import Optional

import structlog

from app.cart import Cart, CartLine, config_for
from app.discounts import DiscountResponse, ResolvedDiscount, assemble, build_discount
from app.resolver import resolve_tier
from app.tiers import parse_tiers

log = structlog.get_logger(__name__)


def discount_for_line(line: CartLine) -> Optional[ResolvedDiscount]:
    raw = config_for(line)
    if raw is None:
        return None
    tier = resolve_tier(line.quantity, parse_tiers(raw))
    if tier is None:
        return None
    return build_discount(line, tier)


def run(cart: Cart) -> DiscountResponse:
    response = assemble(discount_for_line(line) for line in cart.lines)
    log.info("volume_discounts_resolved", lines=len(cart.lines), discounts=len(response.discounts))
    return response
