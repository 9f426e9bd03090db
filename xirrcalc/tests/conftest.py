"""Pytest configuration and fixtures."""

import pytest
from datetime import date


@pytest.fixture
def decade_flows():
    """Three flows five years apart; solves to about -3.46%."""
    dates = [date(1985, 1, 1), date(1990, 1, 1), date(1995, 1, 1)]
    amounts = [1000, -600, -200]
    return dates, amounts


@pytest.fixture
def short_loan_flows():
    """An inflow followed by two larger outflows within five months."""
    dates = [date(2015, 11, 1), date(2015, 10, 1), date(2015, 6, 1)]
    amounts = [-800_000, -2_200_000, 1_000_000]
    return dates, amounts


@pytest.fixture
def annual_loan_flows():
    """Ten entries: a 10,000 loan repaid by nine yearly 1,200 instalments."""
    dates = [date(2020 + year, 1, 1) for year in range(10)]
    amounts = [10_000] + [-1_200] * 9
    return dates, amounts


@pytest.fixture
def annual_investment_flows():
    """Ten entries: a 10,000 investment returning nine yearly 1,500 payments."""
    dates = [date(2020 + year, 1, 1) for year in range(10)]
    amounts = [-10_000] + [1_500] * 9
    return dates, amounts


@pytest.fixture
def crossing_flows():
    """Twelve mixed flows whose Newton iterates cross below a rate of -1."""
    dates = [
        date(2001, 2, 8), date(2004, 8, 6), date(2010, 4, 15), date(2008, 10, 14),
        date(2007, 4, 1), date(2010, 4, 28), date(2001, 11, 6), date(2010, 2, 7),
        date(2008, 1, 3), date(2007, 5, 25), date(2005, 7, 11), date(2002, 5, 30),
    ]
    amounts = [
        937.01, 557.32, 721.12, -414.0, -722.35, 646.45,
        28.58, -48.03, -127.19, 42.77, -578.2, -920.56,
    ]
    return dates, amounts
