"""Provision line builder with currency rounding."""

from __future__ import annotations

import hashlib
import json
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from labor_cost_engine.calculators.types import (
    BenefitKind,
    ContributionKind,
    ProvisionLine,
)


class ProvisionLineBuilder:
    """Builds provision line items with statutory rounding.

    Rounding (half away from zero):
    - Contributions and overtime to whole pesos
    - Benefits to 2 decimals
    """

    PESO_PRECISION = Decimal("1")
    CENT_PRECISION = Decimal("0.01")

    @staticmethod
    def round_to_pesos(amount: Decimal) -> Decimal:
        """Round amount to whole pesos."""
        return amount.quantize(ProvisionLineBuilder.PESO_PRECISION, rounding=ROUND_HALF_UP)

    @staticmethod
    def round_to_cents(amount: Decimal) -> Decimal:
        """Round amount to 2 decimal places (cents)."""
        return amount.quantize(ProvisionLineBuilder.CENT_PRECISION, rounding=ROUND_HALF_UP)

    @staticmethod
    def create_contribution_line(
        kind: ContributionKind,
        name: str,
        description: str,
        amount: Decimal,
    ) -> ProvisionLine:
        """Create an employer contribution line rounded to pesos."""
        return ProvisionLine(
            kind=kind,
            name=name,
            description=description,
            amount=ProvisionLineBuilder.round_to_pesos(amount),
        )

    @staticmethod
    def create_benefit_line(
        kind: BenefitKind,
        name: str,
        description: str,
        amount: Decimal,
    ) -> ProvisionLine:
        """Create a social-benefit line rounded to cents."""
        return ProvisionLine(
            kind=kind,
            name=name,
            description=description,
            amount=ProvisionLineBuilder.round_to_cents(amount),
        )

    @staticmethod
    def sum_lines(lines: Iterable[ProvisionLine]) -> Decimal:
        """Sum line amounts."""
        total = Decimal("0")
        for line in lines:
            total += line.amount
        return total

    @staticmethod
    def compute_lines_hash(lines: Iterable[ProvisionLine]) -> str:
        """Compute deterministic hash for a set of lines."""
        canonical: list[dict[str, Any]] = [line.to_canonical_dict() for line in lines]
        json_str = json.dumps(canonical, sort_keys=True)
        return hashlib.sha256(json_str.encode()).hexdigest()[:32]
