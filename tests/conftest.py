"""Shared fixtures for the test suite."""

import pytest
from unittest.mock import MagicMock

from models import BalanceSheetStatement, CashFlowStatement, IncomeStatement


STATEMENT_HEADER = ("form_type", "fiscal_date_ending", "reported_currency")


def _raw_statement(model, **overrides):
    raw = {"fiscalDateEnding": "2019-12-31", "reportedCurrency": "USD"}
    for i, (name, field) in enumerate(model.model_fields.items()):
        if name in STATEMENT_HEADER:
            continue
        raw[field.alias] = str(1000 + i)
    raw.update(overrides)
    return raw


@pytest.fixture
def mock_response():
    """Factory for mock HTTP responses."""
    def _make(status_code=200, json_data=None, text=""):
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = json_data if json_data is not None else {}
        resp.text = text
        return resp
    return _make


@pytest.fixture
def raw_balance_sheet():
    """Factory fixture: call with wire-name overrides to get a raw balance sheet item."""
    def _make(**overrides):
        return _raw_statement(BalanceSheetStatement, **overrides)
    return _make


@pytest.fixture
def raw_cash_flow():
    def _make(**overrides):
        return _raw_statement(CashFlowStatement, **overrides)
    return _make


@pytest.fixture
def raw_income_statement():
    def _make(**overrides):
        return _raw_statement(IncomeStatement, **overrides)
    return _make


@pytest.fixture
def raw_overview():
    """OVERVIEW payload as Alpha Vantage returns it (every value a string)."""
    return {
        "Symbol": "IBM",
        "AssetType": "Common Stock",
        "Name": "International Business Machines Corporation",
        "Description": "IBM is an American multinational technology company.",
        "Exchange": "NYSE",
        "Currency": "USD",
        "Country": "USA",
        "Sector": "Technology",
        "Industry": "Information Technology Services",
        "Address": "One New Orchard Road, Armonk, NY, United States, 10504",
        "FullTimeEmployees": "352600",
        "FiscalYearEnd": "December",
        "LatestQuarter": "2020-09-30",
        "MarketCapitalization": "111554510848",
        "EBITDA": "15662000128",
        "PERatio": "13.8246",
        "PEGRatio": "8.7032",
        "BookValue": "23.801",
        "DividendPerShare": "6.51",
        "DividendYield": "0.0519",
        "EPS": "9.07",
        "RevenuePerShareTTM": "86.168",
        "ProfitMargin": "0.1059",
        "OperatingMarginTTM": "0.1289",
        "ReturnOnAssetsTTM": "0.0358",
        "ReturnOnEquityTTM": "0.3865",
        "RevenueTTM": "76032999424",
        "GrossProfitTTM": "36489000000",
        "DilutedEPSTTM": "9.07",
        "QuarterlyEarningsGrowthYOY": "-0.013",
        "QuarterlyRevenueGrowthYOY": "-0.026",
        "AnalystTargetPrice": "135.19",
        "TrailingPE": "13.8246",
        "ForwardPE": "10.8225",
        "PriceToSalesRatioTTM": "1.4672",
        "PriceToBookRatio": "5.2661",
        "EVToRevenue": "2.2053",
        "EVToEBITDA": "9.3839",
        "Beta": "1.2307",
        "52WeekHigh": "158.75",
        "52WeekLow": "90.56",
        "50DayMovingAverage": "122.4621",
        "200DayMovingAverage": "121.5264",
        "SharesOutstanding": "891057024",
        "SharesFloat": "890015301",
        "SharesShort": "25151808",
        "SharesShortPriorMonth": "26008446",
        "ShortRatio": "5.37",
        "ShortPercentOutstanding": "0.03",
        "ShortPercentFloat": "0.0283",
        "PercentInsiders": "0.123",
        "PercentInstitutions": "58.664",
        "ForwardAnnualDividendRate": "6.52",
        "ForwardAnnualDividendYield": "0.052",
        "PayoutRatio": "0.7077",
        "DividendDate": "2020-12-10",
        "ExDividendDate": "2020-11-09",
        "LastSplitFactor": "2:1",
        "LastSplitDate": "1999-05-27",
    }
