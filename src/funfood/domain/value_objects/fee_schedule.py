"""Delivery fee schedule value object."""

from dataclasses import dataclass

from funfood.domain.exceptions import ValidationError


@dataclass(frozen=True)
class DeliveryFeeSchedule:
    """Tiered delivery pricing, amounts in VND.

    Up to ``free_distance`` km only the base fee is charged. Each started km
    up to ``standard_distance`` adds ``per_km_fee``; each started km beyond
    that adds ``extra_per_km_fee``.
    """

    base_fee: int = 15000
    per_km_fee: int = 5000
    extra_per_km_fee: int = 7000
    free_distance: float = 2.0
    standard_distance: float = 5.0

    def __post_init__(self) -> None:
        """Validate schedule."""
        if min(self.base_fee, self.per_km_fee, self.extra_per_km_fee) < 0:
            raise ValidationError("Fees must be non-negative")
        if not 0 <= self.free_distance <= self.standard_distance:
            raise ValidationError("Free distance must lie between 0 and the standard distance")
