"""
Base provider interface for company fundamentals sources.

All fundamentals providers must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from models import (
    BalanceSheetStatement,
    CashFlowStatement,
    CompanyProfileInfo,
    IncomeStatement,
)


class FundamentalsDataProvider(ABC):
    """Abstract base class for fundamentals data providers."""

    def __init__(self, api_key: Optional[str] = None):
        """
        Initialize the provider.

        Args:
            api_key: API key for the provider (if required)
        """
        self.api_key = api_key
        self.name = self.__class__.__name__

    @abstractmethod
    def get_company_profile(self, ticker: str) -> CompanyProfileInfo:
        """
        Get the company overview and valuation ratios.

        Args:
            ticker: Stock ticker symbol

        Returns:
            CompanyProfileInfo record
        """
        pass

    @abstractmethod
    def get_balance_sheets(self, ticker: str) -> List[BalanceSheetStatement]:
        """
        Get annual and quarterly balance sheets.

        Args:
            ticker: Stock ticker symbol

        Returns:
            Annual (10K) statements followed by quarterly (10Q) statements
        """
        pass

    @abstractmethod
    def get_cash_flows(self, ticker: str) -> List[CashFlowStatement]:
        """Get annual and quarterly cash flow statements, annual first."""
        pass

    @abstractmethod
    def get_income_statements(self, ticker: str) -> List[IncomeStatement]:
        """Get annual and quarterly income statements, annual first."""
        pass


class ProviderError(Exception):
    """Base exception for provider-specific errors."""
    pass


class RateLimitError(ProviderError):
    """Raised when API rate limit is exceeded."""
    pass


class DataNotFoundError(ProviderError):
    """Raised when data is not available for a ticker."""
    pass
