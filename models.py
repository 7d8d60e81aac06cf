"""
Pydantic data models for Alpha Vantage fundamentals.

Statements and the company profile are flat, immutable records. Attribute
names are snake_case; the API's wire names are kept as aliases so that
``model_dump_json(by_alias=True)`` reproduces the Alpha Vantage field names.
"""

from datetime import date
from enum import Enum
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from utils.dates import format_date
from utils.money import Money, format_money


# ---------------------------------------------------------------------------
# Scalar field types
# ---------------------------------------------------------------------------

MoneyField = Annotated[
    int,
    AfterValidator(Money),
    PlainSerializer(format_money, return_type=str, when_used="json"),
]

DateField = Annotated[
    date,
    PlainSerializer(format_date, return_type=str, when_used="json"),
]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class FormType(str, Enum):
    """SEC filing a statement was reported on."""
    FORM_10K = "10K"  # annual
    FORM_10Q = "10Q"  # quarterly


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

class Statement(BaseModel):
    """Fields shared by every financial statement."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    form_type: FormType
    fiscal_date_ending: DateField
    reported_currency: str = ""


class BalanceSheetStatement(Statement):
    """One annual or quarterly balance sheet."""
    total_assets: int
    intangible_assets: int
    earning_assets: int
    other_current_assets: int
    total_liabilities: int
    total_shareholder_equity: int
    deferred_long_term_liabilities: int
    other_current_liabilities: int
    common_stock: int
    retained_earnings: int
    other_liabilities: int
    goodwill: int
    other_assets: int
    cash: int
    total_current_liabilities: int
    short_term_debt: int
    current_long_term_debt: int
    other_shareholder_equity: int
    property_plant_equipment: int
    total_current_assets: int
    long_term_investments: int
    net_tangible_assets: int
    short_term_investments: int
    net_receivables: int
    long_term_debt: int
    inventory: int
    accounts_payable: int
    total_permanent_equity: int
    additional_paid_in_capital: int
    common_stock_total_equity: int
    preferred_stock_total_equity: int
    retained_earnings_total_equity: int
    treasury_stock: int
    accumulated_amortization: int
    # the API misspells this one
    other_non_currrent_assets: int
    deferred_long_term_asset_charges: int
    total_non_current_assets: int
    capital_lease_obligations: int
    total_long_term_debt: int
    other_non_current_liabilities: int
    total_non_current_liabilities: int
    negative_goodwill: int
    warrants: int
    preferred_stock_redeemable: int
    capital_surplus: int
    liabilities_and_shareholder_equity: int
    cash_and_short_term_investments: int
    accumulated_depreciation: int
    common_stock_shares_outstanding: int


class CashFlowStatement(Statement):
    """One annual or quarterly cash flow statement."""
    investments: int
    change_in_liabilities: int
    cashflow_from_investment: int
    other_cashflow_from_investment: int
    net_borrowings: int
    cashflow_from_financing: int
    other_cashflow_from_financing: int
    change_in_operating_activities: int
    net_income: int
    change_in_cash: int
    operating_cashflow: int
    other_operating_cashflow: int
    depreciation: int
    dividend_payout: int
    stock_sale_and_purchase: int
    change_in_inventory: int
    change_in_account_receivables: int
    change_in_net_income: int
    capital_expenditures: int
    change_in_receivables: int
    change_in_exchange_rate: int
    change_in_cash_and_cash_equivalents: int


class IncomeStatement(Statement):
    """One annual or quarterly income statement."""
    total_revenue: int
    total_operating_expense: int
    cost_of_revenue: int
    gross_profit: int
    ebit: int
    net_income: int
    research_and_development: int
    effect_of_accounting_charges: int
    income_before_tax: int
    minority_interest: int
    selling_general_administrative: int
    other_non_operating_income: int
    operating_income: int
    other_operating_expense: int
    interest_expense: int
    tax_provision: int
    interest_income: int
    net_interest_income: int
    extraordinary_items: int
    non_recurring: int
    other_items: int
    income_tax_expense: int
    total_other_income_expense: int
    discontinued_operations: int
    net_income_from_continuing_operations: int
    net_income_applicable_to_common_shares: int
    preferred_stock_and_other_adjustments: int


# ---------------------------------------------------------------------------
# Company profile
# ---------------------------------------------------------------------------

class CompanyProfileInfo(BaseModel):
    """
    Company overview (OVERVIEW endpoint).

    Ratios and per-share figures are Money; share counts and absolute
    amounts are plain integers.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    symbol: str = Field("", alias="Symbol")
    asset_type: str = Field("", alias="AssetType")
    name: str = Field("", alias="Name")
    description: str = Field("", alias="Description")
    exchange: str = Field("", alias="Exchange")
    currency: str = Field("", alias="Currency")
    country: str = Field("", alias="Country")
    sector: str = Field("", alias="Sector")
    industry: str = Field("", alias="Industry")
    address: str = Field("", alias="Address")
    full_time_employees: int = Field(0, alias="FullTimeEmployees")
    fiscal_year_end: str = Field("", alias="FiscalYearEnd")
    latest_quarter: Optional[DateField] = Field(None, alias="LatestQuarter")
    market_capitalization: int = Field(0, alias="MarketCapitalization")
    ebitda: int = Field(0, alias="EBITDA")
    pe_ratio: MoneyField = Field(Money(0), alias="PERatio")
    peg_ratio: MoneyField = Field(Money(0), alias="PEGRatio")
    book_value: MoneyField = Field(Money(0), alias="BookValue")
    dividend_per_share: MoneyField = Field(Money(0), alias="DividendPerShare")
    dividend_yield: MoneyField = Field(Money(0), alias="DividendYield")
    eps: MoneyField = Field(Money(0), alias="EPS")
    revenue_per_share_ttm: MoneyField = Field(Money(0), alias="RevenuePerShareTTM")
    profit_margin: MoneyField = Field(Money(0), alias="ProfitMargin")
    operating_margin_ttm: MoneyField = Field(Money(0), alias="OperatingMarginTTM")
    return_on_assets_ttm: MoneyField = Field(Money(0), alias="ReturnOnAssetsTTM")
    return_on_equity_ttm: MoneyField = Field(Money(0), alias="ReturnOnEquityTTM")
    revenue_ttm: int = Field(0, alias="RevenueTTM")
    gross_profit_ttm: int = Field(0, alias="GrossProfitTTM")
    diluted_eps_ttm: MoneyField = Field(Money(0), alias="DilutedEPSTTM")
    quarterly_earnings_growth_yoy: MoneyField = Field(Money(0), alias="QuarterlyEarningsGrowthYOY")
    quarterly_revenue_growth_yoy: MoneyField = Field(Money(0), alias="QuarterlyRevenueGrowthYOY")
    analyst_target_price: MoneyField = Field(Money(0), alias="AnalystTargetPrice")
    trailing_pe: MoneyField = Field(Money(0), alias="TrailingPE")
    forward_pe: MoneyField = Field(Money(0), alias="ForwardPE")
    price_to_sales_ratio_ttm: MoneyField = Field(Money(0), alias="PriceToSalesRatioTTM")
    price_to_book_ratio: MoneyField = Field(Money(0), alias="PriceToBookRatio")
    ev_to_revenue: MoneyField = Field(Money(0), alias="EVToRevenue")
    ev_to_ebitda: MoneyField = Field(Money(0), alias="EVToEBITDA")
    beta: MoneyField = Field(Money(0), alias="Beta")
    high_52_week: MoneyField = Field(Money(0), alias="52WeekHigh")
    low_52_week: MoneyField = Field(Money(0), alias="52WeekLow")
    sma_50: MoneyField = Field(Money(0), alias="50DayMovingAverage")
    sma_200: MoneyField = Field(Money(0), alias="200DayMovingAverage")
    shares_outstanding: int = Field(0, alias="SharesOutstanding")
    shares_float: int = Field(0, alias="SharesFloat")
    shares_short: int = Field(0, alias="SharesShort")
    shares_short_prior_month: int = Field(0, alias="SharesShortPriorMonth")
    short_ratio: MoneyField = Field(Money(0), alias="ShortRatio")
    short_percent_outstanding: MoneyField = Field(Money(0), alias="ShortPercentOutstanding")
    short_percent_float: MoneyField = Field(Money(0), alias="ShortPercentFloat")
    percent_insiders: MoneyField = Field(Money(0), alias="PercentInsiders")
    percent_institutions: MoneyField = Field(Money(0), alias="PercentInstitutions")
    forward_annual_dividend_rate: MoneyField = Field(Money(0), alias="ForwardAnnualDividendRate")
    forward_annual_dividend_yield: MoneyField = Field(Money(0), alias="ForwardAnnualDividendYield")
    payout_ratio: MoneyField = Field(Money(0), alias="PayoutRatio")
    dividend_date: Optional[DateField] = Field(None, alias="DividendDate")
    ex_dividend_date: Optional[DateField] = Field(None, alias="ExDividendDate")
    last_split_factor: str = Field("", alias="LastSplitFactor")
    last_split_date: Optional[DateField] = Field(None, alias="LastSplitDate")
