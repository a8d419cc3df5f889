"""Domain models - pure Python dataclasses representing calculator results"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Bracket:
    """Rate applied up to an upper threshold (None = unbounded)"""

    upper_threshold_cents: Optional[int]
    rate: Decimal

    @property
    def unbounded(self) -> bool:
        return self.upper_threshold_cents is None


@dataclass(frozen=True)
class AllocationLineItem:
    """Portion of the quantity that fell inside one bracket"""

    description: str
    taxable_cents: int
    amount_cents: int
    rate: Decimal


@dataclass(frozen=True)
class AllocationResult:
    """Output of a progressive bracket allocation"""

    quantity_cents: int
    line_items: List[AllocationLineItem]
    total_amount_cents: int
    effective_rate: Decimal  # percentage, 2 decimals


@dataclass(frozen=True)
class AmortizationEntry:
    """Single monthly period of a loan schedule"""

    period: int
    principal_cents: int
    interest_cents: int
    remaining_balance_cents: int

    @property
    def payment_cents(self) -> int:
        return self.principal_cents + self.interest_cents


@dataclass(frozen=True)
class AmortizationSchedule:
    """Full repayment schedule with totals derived from its entries"""

    principal_cents: int
    annual_rate_percent: Decimal
    term_years: int
    payment_cents: int  # nominal payment; the final period may differ
    entries: List[AmortizationEntry]
    total_payment_cents: int
    total_interest_cents: int


@dataclass(frozen=True)
class SalesTaxResult:
    amount_cents: int
    tax_rate_percent: Decimal
    tax_cents: int
    total_cents: int


@dataclass(frozen=True)
class SimpleInterestResult:
    principal_cents: int
    rate_percent: Decimal
    time_years: Decimal
    interest_cents: int
    total_cents: int


@dataclass(frozen=True)
class CompoundInterestYear:
    """Year-by-year growth of a compounding investment"""

    year: int
    starting_balance_cents: int
    interest_cents: int
    contribution_cents: int
    ending_balance_cents: int


@dataclass(frozen=True)
class CompoundInterestResult:
    future_value_cents: int
    total_invested_cents: int
    total_interest_cents: int
    annual_breakdown: List[CompoundInterestYear]


@dataclass(frozen=True)
class BmiResult:
    bmi: Decimal
    category: str
    weight_kg: Decimal
    height_cm: Decimal


@dataclass(frozen=True)
class AgeResult:
    years: int
    months: int
    days: int
    summary: str
    birth_date: date
    today: date
    birth_date_formatted: str
    today_formatted: str


@dataclass
class IpInfo:
    """Geolocation lookup outcome; status is "success" or "fail" """

    query: str
    status: str
    country: Optional[str] = None
    country_code: Optional[str] = None
    region_name: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    timezone: Optional[str] = None
    isp: Optional[str] = None
    org: Optional[str] = None
    asn: Optional[str] = None
    message: Optional[str] = None


@dataclass
class CsvConversionResult:
    records: List[Dict[str, str]]
    skipped_lines: List[int]  # 1-based line numbers dropped for a column mismatch
    json_text: str
