"""Operating income, expenses and NOI for one projection year.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from roi_pro.engine.ratios import ZERO, HUNDRED
from roi_pro.models.assumptions import ProjectionConfig


@dataclass(frozen=True)
class EscalationRates:
    """Annual growth as fractions. Inflation applies to every operating figure."""
    appreciation: Decimal
    inflation: Decimal

    @classmethod
    def from_config(cls, config: ProjectionConfig) -> "EscalationRates":
        return cls(
            appreciation=config.appreciation_pct / HUNDRED,
            inflation=config.inflation_pct / HUNDRED,
        )


@dataclass(frozen=True)
class CurrentFigures:
    """Values in effect for the year being projected."""
    property_value: Decimal
    monthly_rent: Decimal
    property_tax: Decimal  # Annual
    insurance: Decimal  # Annual
    hoa: Decimal  # Annual

    @classmethod
    def from_config(cls, config: ProjectionConfig) -> "CurrentFigures":
        return cls(
            property_value=config.purchase_price,
            monthly_rent=config.monthly_rent,
            property_tax=config.property_tax,
            insurance=config.insurance,
            hoa=config.hoa * 12,
        )

    def escalate(self, rates: EscalationRates) -> "CurrentFigures":
        """Next year's figures."""
        growth = 1 + rates.inflation
        return CurrentFigures(
            property_value=self.property_value * (1 + rates.appreciation),
            monthly_rent=self.monthly_rent * growth,
            property_tax=self.property_tax * growth,
            insurance=self.insurance * growth,
            hoa=self.hoa * growth,
        )


@dataclass(frozen=True)
class RentalIncome:
    gross_potential_rent: Decimal = ZERO
    vacancy_loss: Decimal = ZERO
    effective_gross_income: Decimal = ZERO
    management_fee: Decimal = ZERO


@dataclass(frozen=True)
class OperatingYear:
    income: RentalIncome
    maintenance: Decimal
    operating_expenses: Decimal
    noi: Decimal


def rental_income(config: ProjectionConfig, figures: CurrentFigures) -> RentalIncome:
    """EGI = gross rent - vacancy. Management fee is charged on EGI.

    An owner-occupied purchase earns nothing and pays no rental-driven costs.
    """
    if not config.is_rental:
        return RentalIncome()

    gross = figures.monthly_rent * 12
    vacancy = gross * config.vacancy_pct / HUNDRED
    egi = gross - vacancy
    return RentalIncome(
        gross_potential_rent=gross,
        vacancy_loss=vacancy,
        effective_gross_income=egi,
        management_fee=egi * config.management_fee_pct / HUNDRED,
    )


def operating_year(config: ProjectionConfig, figures: CurrentFigures) -> OperatingYear:
    """NOI = EGI - (tax + insurance + HOA + maintenance + management)."""
    income = rental_income(config, figures)
    maintenance = figures.property_value * config.maintenance_pct / HUNDRED
    expenses = (
        figures.property_tax
        + figures.insurance
        + figures.hoa
        + maintenance
        + income.management_fee
    )
    return OperatingYear(
        income=income,
        maintenance=maintenance,
        operating_expenses=expenses,
        noi=income.effective_gross_income - expenses,
    )
