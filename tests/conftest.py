import pytest
from cinema_booking import BookingEngine, CinemaFactory, SalesLedger


@pytest.fixture
def large_engine() -> BookingEngine:
    """9x8 cinema, above the small venue limit"""
    return CinemaFactory.create_engine(9, 8)


@pytest.fixture
def small_engine() -> BookingEngine:
    """6x10 cinema, exactly at the small venue limit"""
    return CinemaFactory.create_engine(6, 10)


@pytest.fixture
def ledger(large_engine) -> SalesLedger:
    sales_ledger = SalesLedger()
    large_engine.add_listener(sales_ledger)
    return sales_ledger


class ScriptedIO:
    """Feeds canned replies to a console and records what it prints"""

    def __init__(self, *replies: str):
        self._replies = iter(replies)
        self.lines = []

    def read(self, prompt: str) -> str:
        try:
            return next(self._replies)
        except StopIteration:
            raise EOFError from None

    def write(self, line: str) -> None:
        self.lines.append(line)


@pytest.fixture
def scripted_io():
    return ScriptedIO
