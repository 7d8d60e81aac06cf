"""
Company Fundamentals Pipeline (Alpha Vantage)

Fetches the company overview and annual/quarterly balance sheets, cash flow
and income statements for a list of tickers, and writes one JSON document
per ticker.

Usage:
    python sources/fundamentals/pipeline.py --tickers IBM                        # All datasets
    python sources/fundamentals/pipeline.py --tickers IBM MSFT --statements income
    python sources/fundamentals/pipeline.py --tickers IBM --output-dir out/       # Custom dir
"""

import argparse
import datetime
import json
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

sys.path.append(str(Path(__file__).parent.parent.parent))

from dotenv import load_dotenv
load_dotenv(os.path.join(Path(__file__).parent.parent.parent, ".env"))

from utils import log
from sources.fundamentals.config import settings
from sources.fundamentals.providers.alpha_vantage import AlphaVantageProvider

logger = log.setup_verbose_logging("fundamentals")

DATASETS = ("profile", "balance", "cash", "income")


class FundamentalsPipeline:
    """
    Alpha Vantage fundamentals extractor.

    Each ticker is fetched dataset by dataset. A ticker that fails is
    logged and skipped; the others still run.
    """

    def __init__(
        self,
        tickers: List[str],
        statements: Optional[List[str]] = None,
        output_dir: Optional[str] = None,
    ):
        self.start = datetime.datetime.now()
        self.statements = list(statements) if statements else list(DATASETS)
        self.output_dir = output_dir

        log.header("FUNDAMENTALS EXTRACTION: Alpha Vantage")

        self.tickers = [t.upper() for t in tickers]
        log.step(f"Processing {len(self.tickers)} tickers: {', '.join(self.tickers)}")

        self.provider = AlphaVantageProvider()
        log.info(f"Using provider: {self.provider.name}")

        self.results: Dict[str, Dict] = {}
        self.failed: List[str] = []

        try:
            for i, ticker in enumerate(self.tickers, 1):
                self._fetch_ticker(ticker, i, len(self.tickers))
        finally:
            self.provider.close()

        if not self.results:
            log.warn("No ticker returned data")

        if self.output_dir:
            log.step("Saving outputs...")
            self._save()

        elapsed = datetime.datetime.now() - self.start
        log.summary_table("Fundamentals Extraction Summary", [
            ("Tickers processed", str(len(self.tickers))),
            ("Succeeded", str(len(self.results))),
            ("Failed", str(len(self.failed))),
            ("Elapsed", str(elapsed)),
        ])
        log.ok("Fundamentals extraction complete")

    def _fetch_ticker(self, ticker: str, idx: int, total: int):
        """Fetch the selected datasets for one ticker."""
        try:
            document = {"symbol": ticker}
            if "profile" in self.statements:
                document["profile"] = self.provider.get_company_profile(ticker)
            if "balance" in self.statements:
                document["balanceSheets"] = self.provider.get_balance_sheets(ticker)
            if "cash" in self.statements:
                document["cashFlows"] = self.provider.get_cash_flows(ticker)
            if "income" in self.statements:
                document["incomeStatements"] = self.provider.get_income_statements(ticker)

            self.results[ticker] = document
            counts = {k: len(v) for k, v in document.items() if isinstance(v, list)}
            log.ticker_done(idx, total, ticker, counts)

        except Exception as e:
            self.failed.append(ticker)
            log.ticker_failed(idx, total, ticker, e)
            logger.exception(f"Failed to fetch fundamentals for {ticker}")

    def _save(self):
        """Write <ticker>.json per ticker, using the API's field names."""
        os.makedirs(self.output_dir, exist_ok=True)
        for ticker, document in self.results.items():
            path = os.path.join(self.output_dir, f"{ticker}.json")
            with open(path, "w") as f:
                json.dump(to_jsonable(document), f, indent=2)
            log.info(f"Wrote {path}")


def to_jsonable(document: Dict) -> Dict:
    """Convert records inside a ticker document to plain JSON values."""
    out = {}
    for key, value in document.items():
        if isinstance(value, list):
            out[key] = [record.model_dump(mode="json", by_alias=True) for record in value]
        elif hasattr(value, "model_dump"):
            out[key] = value.model_dump(mode="json", by_alias=True)
        else:
            out[key] = value
    return out


def main():
    parser = argparse.ArgumentParser(description="Fetch company fundamentals from Alpha Vantage")
    parser.add_argument("--tickers", nargs="+", required=True, help="Ticker symbols (e.g., IBM MSFT)")
    parser.add_argument("--statements", nargs="+", choices=DATASETS,
                        help="Datasets to fetch (default: all)")
    parser.add_argument("--output-dir", default=settings.OUTPUT_DIR,
                        help=f"Directory for <TICKER>.json files (default: {settings.OUTPUT_DIR})")
    args = parser.parse_args()

    FundamentalsPipeline(
        tickers=args.tickers,
        statements=args.statements,
        output_dir=args.output_dir,
    )


if __name__ == "__main__":
    main()
