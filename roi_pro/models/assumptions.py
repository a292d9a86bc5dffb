from dataclasses import dataclass, fields, replace
from decimal import Decimal
from enum import Enum

from roi_pro.engine.ratios import HUNDRED


class Strategy(Enum):
    OWNER_OCCUPIED = "primary"
    RENTAL = "rental"


@dataclass(frozen=True)
class ProjectionConfig:
    """Fully populated purchase scenario.

    Every rate is a percentage (Decimal("6.5") means 6.5%).
    """
    strategy: Strategy

    # Purchase
    purchase_price: Decimal
    closing_cost_pct: Decimal
    down_payment_pct: Decimal

    # Financing
    interest_rate_pct: Decimal  # Annual
    loan_term_years: int
    extra_monthly_payment: Decimal

    # Income (rental strategy only)
    monthly_rent: Decimal
    vacancy_pct: Decimal
    management_fee_pct: Decimal  # % of effective gross income

    # Expenses
    property_tax: Decimal  # Annual
    insurance: Decimal  # Annual
    hoa: Decimal  # Monthly
    maintenance_pct: Decimal  # Annual, % of current property value

    # Growth
    appreciation_pct: Decimal
    inflation_pct: Decimal  # Escalates rent, tax, insurance and HOA

    # Affordability (owner-occupied strategy)
    household_income: Decimal  # Annual, gross

    horizon_years: int
    name: str = "Property A"

    @property
    def is_rental(self) -> bool:
        return self.strategy is Strategy.RENTAL

    @property
    def down_payment(self) -> Decimal:
        return self.purchase_price * self.down_payment_pct / HUNDRED

    @property
    def closing_costs(self) -> Decimal:
        return self.purchase_price * self.closing_cost_pct / HUNDRED

    @property
    def loan_amount(self) -> Decimal:
        return self.purchase_price - self.down_payment

    @property
    def initial_investment(self) -> Decimal:
        """Cash needed at closing: down payment + closing costs."""
        return self.down_payment + self.closing_costs


BASELINE_CONFIG = ProjectionConfig(
    strategy=Strategy.OWNER_OCCUPIED,
    purchase_price=Decimal("450000"),
    closing_cost_pct=Decimal("3"),
    down_payment_pct=Decimal("20"),
    interest_rate_pct=Decimal("6.5"),
    loan_term_years=30,
    extra_monthly_payment=Decimal("0"),
    monthly_rent=Decimal("2800"),
    vacancy_pct=Decimal("5"),
    management_fee_pct=Decimal("0"),
    property_tax=Decimal("5000"),
    insurance=Decimal("1200"),
    hoa=Decimal("0"),
    maintenance_pct=Decimal("1"),
    appreciation_pct=Decimal("3.5"),
    inflation_pct=Decimal("2.5"),
    household_income=Decimal("120000"),
    horizon_years=30,
)

_FIELD_TYPES = {f.name: f.type for f in fields(ProjectionConfig)}


def _coerce(name: str, value):
    field_type = _FIELD_TYPES[name]
    if field_type is Decimal:
        return value if isinstance(value, Decimal) else Decimal(str(value))
    if field_type is int:
        return int(value)
    if field_type is Strategy:
        return value if isinstance(value, Strategy) else Strategy(value)
    return str(value)


def with_overrides(base: ProjectionConfig, **overrides) -> ProjectionConfig:
    """Return a copy of ``base`` with the given fields replaced.

    Values are coerced to the field's type, so floats, strings and enum values
    are all accepted. Unknown keys are ignored.
    """
    changes = {k: _coerce(k, v) for k, v in overrides.items() if k in _FIELD_TYPES}
    return replace(base, **changes)


def config_to_dict(config: ProjectionConfig) -> dict[str, str | int]:
    """JSON-safe snapshot. Decimals become strings to keep full precision."""
    data: dict[str, str | int] = {}
    for name, field_type in _FIELD_TYPES.items():
        value = getattr(config, name)
        if field_type is Decimal:
            data[name] = str(value)
        elif field_type is Strategy:
            data[name] = value.value
        else:
            data[name] = value
    return data


def config_from_dict(data: dict, base: ProjectionConfig = BASELINE_CONFIG) -> ProjectionConfig:
    """Rebuild a config from a snapshot, seeding missing fields from ``base``."""
    return with_overrides(base, **data)
