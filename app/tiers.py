# Merchant tier schedules: "buy N, get X% off"
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
import structlog

log = structlog.get_logger(__name__)


class TierDefinition(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True, populate_by_name=True)

    # qty is a signed 64-bit integer on the wire
    threshold: int = Field(alias="qty", ge=-2**63, le=2**63 - 1)
    discount_percent: float = Field(alias="discount", allow_inf_nan=False)
    label: str


_SCHEDULE = TypeAdapter(List[TierDefinition])


def parse_tiers(raw: Optional[str]) -> List[TierDefinition]:
    """Decode a tier schedule. Anything unparseable means no tiers at all."""
    if raw is None or not raw.strip():
        return []
    try:
        return _SCHEDULE.validate_json(raw)
    except ValidationError as exc:
        log.debug("tier_config_invalid", errors=exc.error_count())
        return []
