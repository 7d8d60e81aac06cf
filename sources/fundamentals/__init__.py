"""
Company fundamentals (Alpha Vantage).

Fetches the company overview and annual/quarterly balance sheets, cash
flow and income statements, decoded into typed records.
"""
