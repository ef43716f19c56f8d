# Cart snapshot as the host delivers it, plus the tier-config lookup
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Input(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class FieldValue(_Input):
    value: Optional[str] = None


class Metaobject(_Input):
    typename: Literal["Metaobject"] = Field("Metaobject", alias="__typename")
    tiers: Optional[FieldValue] = None


class OtherReference(_Input):
    # files, pages, products... anything a metafield can point at that isn't a metaobject
    typename: str = Field(alias="__typename")


class Metafield(_Input):
    reference: Optional[Union[Metaobject, OtherReference]] = Field(None, union_mode="left_to_right")


class Product(_Input):
    volume_discount: Optional[Metafield] = Field(None, alias="volumeDiscount")


class ProductVariant(_Input):
    typename: Literal["ProductVariant"] = Field("ProductVariant", alias="__typename")
    id: str
    product: Product = Product()

    def tier_config(self) -> Optional[str]:
        metafield = self.product.volume_discount
        if metafield is None:
            return None
        reference = metafield.reference
        if not isinstance(reference, Metaobject) or reference.tiers is None:
            return None
        return reference.tiers.value


class CustomProduct(_Input):
    typename: Literal["CustomProduct"] = Field("CustomProduct", alias="__typename")
    title: Optional[str] = None

    def tier_config(self) -> Optional[str]:
        return None


Merchandise = Annotated[Union[ProductVariant, CustomProduct], Field(discriminator="typename")]


class CartLine(_Input):
    quantity: int = Field(gt=0)
    merchandise: Merchandise


class Cart(_Input):
    lines: List[CartLine] = []


class RunInput(_Input):
    cart: Cart


def config_for(line: CartLine) -> Optional[str]:
    """Raw tier schedule text attached to the line's merchandise, if any."""
    return line.merchandise.tier_config()
