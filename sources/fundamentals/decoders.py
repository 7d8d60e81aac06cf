"""
Decode raw Alpha Vantage payloads into typed records.

Every wire value is a string. Each field is run through its codec
explicitly; the first field that fails aborts the whole record with a
ParseError naming the field and the offending value.
"""

from typing import Callable, Dict, List, Type, TypeVar

from models import (
    BalanceSheetStatement,
    CashFlowStatement,
    CompanyProfileInfo,
    FormType,
    IncomeStatement,
    Statement,
)
from utils.dates import decode_date
from utils.money import decode_money
from utils.parsing import ParseError, parse_int64ish, parse_text


S = TypeVar("S", bound=Statement)

_STATEMENT_HEADER = ("form_type", "fiscal_date_ending", "reported_currency")

PROFILE_INT_FIELDS = (
    "FullTimeEmployees",
    "MarketCapitalization",
    "EBITDA",
    "RevenueTTM",
    "GrossProfitTTM",
    "SharesOutstanding",
    "SharesFloat",
    "SharesShort",
    "SharesShortPriorMonth",
)

PROFILE_DATE_FIELDS = (
    "LatestQuarter",
    "DividendDate",
    "ExDividendDate",
    "LastSplitDate",
)

PROFILE_MONEY_FIELDS = (
    "PERatio",
    "PEGRatio",
    "BookValue",
    "DividendPerShare",
    "DividendYield",
    "EPS",
    "RevenuePerShareTTM",
    "ProfitMargin",
    "OperatingMarginTTM",
    "ReturnOnAssetsTTM",
    "ReturnOnEquityTTM",
    "DilutedEPSTTM",
    "QuarterlyEarningsGrowthYOY",
    "QuarterlyRevenueGrowthYOY",
    "AnalystTargetPrice",
    "TrailingPE",
    "ForwardPE",
    "PriceToSalesRatioTTM",
    "PriceToBookRatio",
    "EVToRevenue",
    "EVToEBITDA",
    "Beta",
    "52WeekHigh",
    "52WeekLow",
    "50DayMovingAverage",
    "200DayMovingAverage",
    "ShortRatio",
    "ShortPercentOutstanding",
    "ShortPercentFloat",
    "PercentInsiders",
    "PercentInstitutions",
    "ForwardAnnualDividendRate",
    "ForwardAnnualDividendYield",
    "PayoutRatio",
)


def _decode_field(key: str, codec: Callable, raw_value):
    try:
        return codec(raw_value)
    except ParseError as e:
        raise ParseError(raw_value, f"field '{key}': {e.reason}") from e


def _decode_statement(model: Type[S], raw: Dict, form_type: FormType) -> S:
    values = {
        "form_type": form_type,
        "fiscal_date_ending": _decode_field(
            "fiscalDateEnding", decode_date, raw.get("fiscalDateEnding", "")
        ),
        "reported_currency": _decode_field(
            "reportedCurrency", parse_text, raw.get("reportedCurrency", "")
        ),
    }
    for name, field in model.model_fields.items():
        if name in _STATEMENT_HEADER:
            continue
        # a missing amount decodes from "" and fails like a malformed one
        values[name] = _decode_field(field.alias, parse_int64ish, raw.get(field.alias, ""))
    return model(**values)


def from_balance_sheet(raw: Dict, form_type: FormType) -> BalanceSheetStatement:
    """Decode one item of a BALANCE_SHEET report list."""
    return _decode_statement(BalanceSheetStatement, raw, form_type)


def from_cash_flow(raw: Dict, form_type: FormType) -> CashFlowStatement:
    """Decode one item of a CASH_FLOW report list."""
    return _decode_statement(CashFlowStatement, raw, form_type)


def from_income_statement(raw: Dict, form_type: FormType) -> IncomeStatement:
    """Decode one item of an INCOME_STATEMENT report list."""
    return _decode_statement(IncomeStatement, raw, form_type)


def from_statement_response(raw: Dict, decoder: Callable[[Dict, FormType], S]) -> List[S]:
    """
    Decode a statement response.

    Args:
        raw: Payload with "annualReports" and "quarterlyReports" lists
        decoder: One of from_balance_sheet, from_cash_flow, from_income_statement

    Returns:
        Annual reports (10K) followed by quarterly reports (10Q), each in
        payload order
    """
    annual = raw.get("annualReports") or []
    quarterly = raw.get("quarterlyReports") or []

    records = []
    for item in annual:
        records.append(decoder(item, FormType.FORM_10K))
    for item in quarterly:
        records.append(decoder(item, FormType.FORM_10Q))
    return records


def from_company_profile(raw: Dict) -> CompanyProfileInfo:
    """
    Decode an OVERVIEW payload.

    Keys absent from the payload keep the model defaults. Dates have no
    missing-value token: a present but malformed date is a ParseError.
    """
    values = {}
    for name, field in CompanyProfileInfo.model_fields.items():
        key = field.alias
        if key not in raw:
            continue
        raw_value = raw[key]
        if key in PROFILE_MONEY_FIELDS:
            values[name] = _decode_field(key, decode_money, raw_value)
        elif key in PROFILE_INT_FIELDS:
            values[name] = _decode_field(key, parse_int64ish, raw_value)
        elif key in PROFILE_DATE_FIELDS:
            values[name] = _decode_field(key, decode_date, raw_value)
        else:
            values[name] = _decode_field(key, parse_text, raw_value)
    return CompanyProfileInfo(**values)
