# Per-line discount instructions and the response handed back to the host
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.cart import CartLine
from app.tiers import TierDefinition


class DiscountApplicationStrategy(str, Enum):
    FIRST = "FIRST"
    MAXIMUM = "MAXIMUM"


class _Output(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Percentage(_Output):
    value: float


class Value(_Output):
    percentage: Percentage


class ProductVariantTarget(_Output):
    id: str
    # None targets the whole line
    quantity: Optional[int] = None


class Target(_Output):
    product_variant: ProductVariantTarget = Field(alias="productVariant")


class ResolvedDiscount(_Output):
    value: Value
    targets: List[Target]
    message: Optional[str] = None

    @property
    def target_id(self) -> str:
        return self.targets[0].product_variant.id

    @property
    def percent(self) -> float:
        return self.value.percentage.value


class DiscountResponse(_Output):
    discounts: List[ResolvedDiscount] = []
    discount_application_strategy: DiscountApplicationStrategy = Field(
        default=DiscountApplicationStrategy.MAXIMUM,
        alias="discountApplicationStrategy",
    )


def build_discount(line: CartLine, tier: TierDefinition) -> ResolvedDiscount:
    """Only variant lines carry a tier config, so the target is always the variant."""
    return ResolvedDiscount(
        value=Value(percentage=Percentage(value=tier.discount_percent)),
        targets=[Target(product_variant=ProductVariantTarget(id=line.merchandise.id))],
        message=tier.label,
    )


def assemble(results: Iterable[Optional[ResolvedDiscount]]) -> DiscountResponse:
    """Drop lines without a discount, keep cart order, and ask the host to keep
    the largest discount on overlapping targets instead of stacking."""
    return DiscountResponse(
        discounts=[r for r in results if r is not None],
        discount_application_strategy=DiscountApplicationStrategy.MAXIMUM,
    )
