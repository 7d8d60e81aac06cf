"""
Alpha Vantage fundamentals provider.

Official API documentation: https://www.alphavantage.co/documentation/#fundamentals
"""

import logging
import os
import time
from typing import Callable, Dict, List, Optional
from urllib.parse import urlencode

import requests

from models import (
    BalanceSheetStatement,
    CashFlowStatement,
    CompanyProfileInfo,
    IncomeStatement,
)
from sources.fundamentals.config import settings
from sources.fundamentals.decoders import (
    from_balance_sheet,
    from_cash_flow,
    from_company_profile,
    from_income_statement,
    from_statement_response,
)
from utils.parsing import ParseError
from utils.session import RequestSession, redact_api_key

from .base import DataNotFoundError, FundamentalsDataProvider, ProviderError, RateLimitError


logger = logging.getLogger(__name__)


def build_url(api_key: str, function: str, symbol: str, base_url: str = settings.BASE_URL) -> str:
    """Build a query URL, e.g. <base>/query?function=OVERVIEW&symbol=IBM&apikey=demo."""
    query = urlencode({"function": function, "symbol": symbol, "apikey": api_key})
    return f"{base_url.rstrip('/')}/query?{query}"


class AlphaVantageProvider(FundamentalsDataProvider):
    """
    Alpha Vantage fundamentals provider.

    Free tier: 25 requests/day, 5 calls/minute
    Paid tiers: Remove daily cap, increase rate limits

    API Key: Get from https://www.alphavantage.co/support/#api-key
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        session=None,
        calls_per_minute: Optional[int] = None,
        timeout: Optional[int] = None,
        base_url: Optional[str] = None,
    ):
        """
        Initialize Alpha Vantage provider.

        Args:
            api_key: Alpha Vantage API key. If not provided, reads from
                    ALPHA_VANTAGE_API_KEY environment variable.
            session: Transport with a requests-style ``get(url, headers=, timeout=)``.
                    Defaults to a RequestSession.
            calls_per_minute: Client-side pacing; 0 disables it.
            timeout: Request timeout in seconds.
            base_url: API root, defaults to https://www.alphavantage.co
        """
        if not api_key:
            api_key = os.getenv("ALPHA_VANTAGE_API_KEY") or settings.API_KEY

        if not api_key:
            raise ValueError(
                "Alpha Vantage API key required. Set ALPHA_VANTAGE_API_KEY "
                "environment variable or pass api_key parameter."
            )

        super().__init__(api_key)
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.base_url = base_url or settings.BASE_URL
        self.session = session if session is not None else RequestSession(timeout=self.timeout)

        if calls_per_minute is None:
            calls_per_minute = settings.CALLS_PER_MINUTE
        self.seconds_between_calls = 60 / calls_per_minute if calls_per_minute > 0 else 0
        self.last_call_time = 0

    def _rate_limit(self):
        """Space out API calls to stay under the per-minute quota."""
        if not self.seconds_between_calls:
            return
        elapsed = time.time() - self.last_call_time
        if elapsed < self.seconds_between_calls:
            sleep_time = self.seconds_between_calls - elapsed
            logger.debug(f"Rate limiting: sleeping {sleep_time:.2f}s")
            time.sleep(sleep_time)
        self.last_call_time = time.time()

    def _make_request(self, function: str, symbol: str) -> Dict:
        """
        Make API request with error handling.

        Args:
            function: Alpha Vantage function, e.g. "BALANCE_SHEET"
            symbol: Stock ticker symbol

        Returns:
            JSON response

        Raises:
            RateLimitError: If rate limit exceeded
            DataNotFoundError: If data not available
            ProviderError: For other API errors
        """
        self._rate_limit()

        url = build_url(self.api_key, function, symbol, base_url=self.base_url)

        try:
            response = self.session.get(
                url,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"Request failed: {redact_api_key(str(e))}") from None

        if response.status_code != 200:
            logger.debug(f"{function} {symbol}: {response.text}")
            if response.status_code == 429:
                raise RateLimitError("Rate limit exceeded")
            raise ProviderError(f"Alpha Vantage HTTP status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(f"Invalid JSON response: {e}")

        if not isinstance(data, dict):
            raise ProviderError(f"Unexpected response type: {type(data).__name__}")

        # Check for API error messages
        if "Error Message" in data:
            raise DataNotFoundError(data["Error Message"])

        if "Note" in data and "API call frequency" in data["Note"]:
            raise RateLimitError(data["Note"])

        if "Information" in data:
            # Usually means invalid API key or other config issue
            raise ProviderError(data["Information"])

        return data

    def _fetch_statements(self, function: str, ticker: str, decoder: Callable) -> List:
        logger.info(f"Fetching {function} for {ticker}")
        try:
            data = self._make_request(function, ticker)
            records = from_statement_response(data, decoder)
            logger.info(f"{ticker}: Retrieved {len(records)} {function} records")
            return records

        except (ProviderError, ParseError):
            raise
        except Exception as e:
            logger.exception(f"{ticker}: Unexpected error fetching {function}")
            raise ProviderError(f"Failed to fetch {function}: {e}")

    def get_company_profile(self, ticker: str) -> CompanyProfileInfo:
        """
        Get company overview and valuation ratios.

        Uses OVERVIEW endpoint for fundamental data.
        """
        logger.info(f"Fetching company profile for {ticker}")
        try:
            data = self._make_request("OVERVIEW", ticker)

            if not data or "Symbol" not in data:
                raise DataNotFoundError(f"{ticker}: No overview data available")

            profile = from_company_profile(data)
            logger.info(f"{ticker}: Retrieved company profile")
            return profile

        except (ProviderError, ParseError):
            raise
        except Exception as e:
            logger.exception(f"{ticker}: Unexpected error fetching profile")
            raise ProviderError(f"Failed to fetch profile: {e}")

    def get_balance_sheets(self, ticker: str) -> List[BalanceSheetStatement]:
        """Get balance sheets (BALANCE_SHEET endpoint), annual first."""
        return self._fetch_statements("BALANCE_SHEET", ticker, from_balance_sheet)

    def get_cash_flows(self, ticker: str) -> List[CashFlowStatement]:
        """Get cash flow statements (CASH_FLOW endpoint), annual first."""
        return self._fetch_statements("CASH_FLOW", ticker, from_cash_flow)

    def get_income_statements(self, ticker: str) -> List[IncomeStatement]:
        """Get income statements (INCOME_STATEMENT endpoint), annual first."""
        return self._fetch_statements("INCOME_STATEMENT", ticker, from_income_statement)

    def close(self):
        """Release the transport's connections, if it holds any."""
        close = getattr(self.session, "close", None)
        if callable(close):
            close()
