"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional

from toolhub.domain.amortization import MAX_TERM_YEARS
from toolhub.domain.interest import CompoundingFrequency


class BracketSchema(BaseModel):
    """One row of a caller-supplied bracket table"""

    upper_threshold_cents: Optional[int] = Field(None, gt=0, description="Upper bound in cents; omit for the top bracket")
    rate: float = Field(..., ge=0, le=1, description="Rate as a fraction, e.g. 0.15")


class IncomeTaxRequest(BaseModel):
    """Request body for POST /v1/income-tax"""

    income_cents: int = Field(..., ge=0, description="Annual taxable income in cents")
    brackets: Optional[List[BracketSchema]] = Field(None, min_length=1, description="Defaults to the built-in table")


class LineItemSchema(BaseModel):
    description: str
    taxable_cents: int
    amount_cents: int
    rate_percent: float


class IncomeTaxResponse(BaseModel):
    """Response for POST /v1/income-tax"""

    income_cents: int
    total_tax_cents: int
    effective_tax_rate: float
    breakdown: List[LineItemSchema]


class LoanRequest(BaseModel):
    """Request body for POST /v1/loan"""

    loan_amount_cents: int = Field(..., gt=0, description="Principal in cents")
    annual_interest_rate: float = Field(..., ge=0, description="Annual rate as a percentage, e.g. 6 for 6%")
    loan_term_years: int = Field(..., gt=0, le=MAX_TERM_YEARS, description="Term in whole years")


class AmortizationEntrySchema(BaseModel):
    month: int
    principal_cents: int
    interest_cents: int
    payment_cents: int
    remaining_balance_cents: int


class LoanResponse(BaseModel):
    """Response for POST /v1/loan"""

    monthly_payment_cents: int
    total_payment_cents: int
    total_interest_cents: int
    amortization_schedule: List[AmortizationEntrySchema]


class SalesTaxRequest(BaseModel):
    amount_cents: int = Field(..., gt=0)
    tax_rate: float = Field(..., ge=0, le=100, description="Percentage, e.g. 7.5")


class SalesTaxResponse(BaseModel):
    amount_cents: int
    tax_rate_applied: float
    tax_cents: int
    total_cents: int


class SimpleInterestRequest(BaseModel):
    principal_cents: int = Field(..., gt=0)
    rate: float = Field(..., ge=0, le=100, description="Annual rate as a percentage")
    time_years: float = Field(..., gt=0)


class SimpleInterestResponse(BaseModel):
    principal_cents: int
    rate: float
    time_years: float
    interest_cents: int
    total_cents: int


class CompoundInterestRequest(BaseModel):
    principal_cents: int = Field(..., gt=0)
    annual_interest_rate: float = Field(..., ge=0, le=100)
    investment_term_years: int = Field(..., gt=0, le=MAX_TERM_YEARS)
    compounding_frequency: CompoundingFrequency
    annual_contribution_cents: int = Field(0, ge=0)


class AnnualBreakdownSchema(BaseModel):
    year: int
    starting_balance_cents: int
    interest_cents: int
    contribution_cents: int
    ending_balance_cents: int


class CompoundInterestResponse(BaseModel):
    future_value_cents: int
    total_invested_cents: int
    total_interest_cents: int
    annual_breakdown: List[AnnualBreakdownSchema]


class BmiRequest(BaseModel):
    weight_kg: float = Field(..., gt=0)
    height_cm: float = Field(..., gt=0)


class BmiResponse(BaseModel):
    bmi: float
    category: str
    weight_kg: float
    height_cm: float


class AgeRequest(BaseModel):
    birth_date: date = Field(..., description="YYYY-MM-DD")


class AgeResponse(BaseModel):
    years: int
    months: int
    days: int
    summary: str
    birth_date_formatted: str
    today_formatted: str


class IpInfoResponse(BaseModel):
    """Response for GET /v1/ip-info; failures carry status="fail" and a message"""

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


class CsvToJsonRequest(BaseModel):
    """Request body for POST /v1/csv-to-json"""

    csv_text: str = Field(..., description="CSV content; the first row is the header")


class CsvToJsonResponse(BaseModel):
    json_text: str
    row_count: int
    skipped_lines: List[int]
