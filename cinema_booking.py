import argparse
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from threading import Lock
from typing import Callable, List, Optional, Tuple


# ==================== Enums ====================

class SeatStatus(Enum):
    """Status of a seat"""
    AVAILABLE = "S"
    BOOKED = "B"

    def __str__(self):
        return self.value


class PurchaseStatus(Enum):
    """Outcome of a ticket purchase"""
    SUCCESS = "SUCCESS"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    ALREADY_BOOKED = "ALREADY_BOOKED"


class MenuChoice(Enum):
    """Console menu entries"""
    EXIT = 0
    SHOW_SEATS = 1
    BUY_TICKET = 2
    STATISTICS = 3


# ==================== Configuration ====================

class ConfigurationError(ValueError):
    """Raised when a cinema is configured with invalid dimensions"""
    pass


@dataclass(frozen=True)
class CinemaConfig:
    """Seating dimensions, fixed for the lifetime of a grid"""
    rows: int
    seats_per_row: int

    def __post_init__(self):
        for name, value in (("rows", self.rows), ("seats_per_row", self.seats_per_row)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ConfigurationError(f"{name} must be positive, got {value}")

    @property
    def total_seats(self) -> int:
        return self.rows * self.seats_per_row


@dataclass(frozen=True)
class PricingConfig:
    """Ticket prices for the two-tier pricing scheme"""
    small_venue_limit: int = 60
    front_price: int = 10
    back_price: int = 8

    def __post_init__(self):
        for name, value in (("small_venue_limit", self.small_venue_limit),
                            ("front_price", self.front_price),
                            ("back_price", self.back_price)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} cannot be negative, got {value}")


# ==================== Core Models ====================

class SeatGrid:
    """Rectangular matrix of seat availability (0-indexed internally)"""

    def __init__(self, rows: int, seats_per_row: int):
        self._config = CinemaConfig(rows, seats_per_row)
        self._cells: List[List[SeatStatus]] = [
            [SeatStatus.AVAILABLE for _ in range(seats_per_row)] for _ in range(rows)
        ]

    def get_config(self) -> CinemaConfig:
        return self._config

    def get_rows(self) -> int:
        return self._config.rows

    def get_seats_per_row(self) -> int:
        return self._config.seats_per_row

    def get_total_seats(self) -> int:
        return self._config.total_seats

    def is_valid_position(self, row: int, seat: int) -> bool:
        return 0 <= row < self.get_rows() and 0 <= seat < self.get_seats_per_row()

    def get_status(self, row: int, seat: int) -> SeatStatus:
        if not self.is_valid_position(row, seat):
            raise ValueError(f"Invalid position: ({row}, {seat})")
        return self._cells[row][seat]

    def is_booked(self, row: int, seat: int) -> bool:
        return self.get_status(row, seat) == SeatStatus.BOOKED

    def set_booked(self, row: int, seat: int) -> None:
        if not self.is_valid_position(row, seat):
            raise ValueError(f"Invalid position: ({row}, {seat})")
        self._cells[row][seat] = SeatStatus.BOOKED

    def booked_positions(self) -> List[Tuple[int, int]]:
        """All booked (row, seat) pairs in row-major order"""
        return [
            (row, seat)
            for row, cells in enumerate(self._cells)
            for seat, status in enumerate(cells)
            if status == SeatStatus.BOOKED
        ]

    def render(self) -> List[str]:
        """
        Text view of the grid: a title, a header of seat numbers,
        then one line per row. Row and seat numbers are 1-indexed.
        """
        lines = ["Cinema:"]
        lines.append("  " + "".join(f"{seat} " for seat in range(1, self.get_seats_per_row() + 1)))
        for row_number, cells in enumerate(self._cells, start=1):
            lines.append(f"{row_number} " + "".join(f"{status} " for status in cells))
        return lines

    def __repr__(self) -> str:
        return f"SeatGrid({self.get_rows()}x{self.get_seats_per_row()})"


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of one purchase attempt"""
    status: PurchaseStatus
    row_number: int
    seat_number: int
    price: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == PurchaseStatus.SUCCESS


@dataclass(frozen=True)
class StatisticsReport:
    """Snapshot of sales and occupancy"""
    tickets_sold: int
    occupancy_percent: float
    current_revenue: int
    max_revenue: int

    def format_occupancy(self) -> str:
        percent = Decimal(str(self.occupancy_percent)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
        return f"{percent}%"

    def to_lines(self) -> List[str]:
        return [
            f"Number of purchased tickets: {self.tickets_sold}",
            f"Percentage: {self.format_occupancy()}",
            f"Current income: ${self.current_revenue}",
            f"Total income: ${self.max_revenue}",
        ]


# ==================== Pricing ====================

class PricingPolicy:
    """
    Two-tier pricing.

    Venues up to the small venue limit charge the front price everywhere.
    Larger venues charge the front price for the first rows // 2 rows and
    the back price for the rest, so an odd row count gives the back half
    the extra row.
    """

    def __init__(self, config: Optional[PricingConfig] = None):
        self._config = config or PricingConfig()

    def get_config(self) -> PricingConfig:
        return self._config

    def is_small_venue(self, rows: int, seats_per_row: int) -> bool:
        return rows * seats_per_row <= self._config.small_venue_limit

    def seat_price(self, rows: int, seats_per_row: int, row_number: int) -> int:
        """Price of one seat in the given 1-indexed row"""
        if not 1 <= row_number <= rows:
            raise ValueError(f"Invalid row number: {row_number}")
        if self.is_small_venue(rows, seats_per_row):
            return self._config.front_price
        if row_number <= rows // 2:
            return self._config.front_price
        return self._config.back_price

    def total_capacity_revenue(self, rows: int, seats_per_row: int) -> int:
        """Revenue if every seat sells"""
        if self.is_small_venue(rows, seats_per_row):
            return rows * seats_per_row * self._config.front_price
        front_rows = rows // 2
        back_rows = rows - front_rows
        return (front_rows * seats_per_row * self._config.front_price +
                back_rows * seats_per_row * self._config.back_price)


# ==================== Validation & Statistics ====================

class PurchaseValidator:
    """Checks a 1-indexed purchase request against the grid"""

    @staticmethod
    def validate(grid: SeatGrid, row_number: int, seat_number: int) -> PurchaseStatus:
        row, seat = row_number - 1, seat_number - 1
        if not grid.is_valid_position(row, seat):
            return PurchaseStatus.OUT_OF_RANGE
        if grid.is_booked(row, seat):
            return PurchaseStatus.ALREADY_BOOKED
        return PurchaseStatus.SUCCESS


class StatisticsCalculator:
    """Aggregates grid state into a StatisticsReport"""

    @staticmethod
    def compute(grid: SeatGrid, pricing: PricingPolicy) -> StatisticsReport:
        rows = grid.get_rows()
        seats_per_row = grid.get_seats_per_row()

        tickets_sold = 0
        current_revenue = 0
        for row, _ in grid.booked_positions():
            tickets_sold += 1
            current_revenue += pricing.seat_price(rows, seats_per_row, row + 1)

        return StatisticsReport(
            tickets_sold=tickets_sold,
            occupancy_percent=tickets_sold * 100.0 / grid.get_total_seats(),
            current_revenue=current_revenue,
            max_revenue=pricing.total_capacity_revenue(rows, seats_per_row),
        )


# ==================== Observer Pattern: Booking Event Listeners ====================

class BookingEventListener(ABC):
    """Abstract base class for booking event observers"""

    @abstractmethod
    def on_ticket_purchased(self, result: PurchaseResult) -> None:
        pass

    @abstractmethod
    def on_purchase_rejected(self, result: PurchaseResult) -> None:
        pass


class ConsoleLogger(BookingEventListener):
    """Logs booking events to the console"""

    def __init__(self, output: Callable[[str], None] = print):
        self._output = output

    def on_ticket_purchased(self, result: PurchaseResult) -> None:
        self._output(f"[LOG] Seat ({result.row_number}, {result.seat_number}) sold for ${result.price}")

    def on_purchase_rejected(self, result: PurchaseResult) -> None:
        self._output(f"[LOG] Purchase of seat ({result.row_number}, {result.seat_number}) "
                     f"rejected: {result.status.value}")


class SalesLedger(BookingEventListener):
    """Keeps every accepted purchase in order"""

    def __init__(self):
        self._purchases: List[PurchaseResult] = []
        self._rejections = 0

    def on_ticket_purchased(self, result: PurchaseResult) -> None:
        self._purchases.append(result)

    def on_purchase_rejected(self, result: PurchaseResult) -> None:
        self._rejections += 1

    def get_purchases(self) -> List[PurchaseResult]:
        return list(self._purchases)

    def get_total_revenue(self) -> int:
        return sum(purchase.price for purchase in self._purchases)

    def get_rejection_count(self) -> int:
        return self._rejections


# ==================== Booking Engine ====================

class BookingEngine:
    """Owns the seat grid and applies purchases against it"""

    def __init__(self, grid: SeatGrid, pricing: Optional[PricingPolicy] = None):
        self._grid = grid
        self._pricing = pricing or PricingPolicy()
        self._listeners: List[BookingEventListener] = []
        self._lock = Lock()

    def add_listener(self, listener: BookingEventListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: BookingEventListener) -> None:
        self._listeners.remove(listener)

    def notify_ticket_purchased(self, result: PurchaseResult) -> None:
        for listener in self._listeners:
            listener.on_ticket_purchased(result)

    def notify_purchase_rejected(self, result: PurchaseResult) -> None:
        for listener in self._listeners:
            listener.on_purchase_rejected(result)

    def get_grid(self) -> SeatGrid:
        return self._grid

    def get_pricing(self) -> PricingPolicy:
        return self._pricing

    def render(self) -> List[str]:
        with self._lock:
            return self._grid.render()

    def ticket_price(self, row_number: int) -> int:
        return self._pricing.seat_price(
            self._grid.get_rows(), self._grid.get_seats_per_row(), row_number
        )

    def get_seat_status(self, row_number: int, seat_number: int) -> Optional[SeatStatus]:
        """Status of a 1-indexed seat, or None when it is outside the grid"""
        row, seat = row_number - 1, seat_number - 1
        if not self._grid.is_valid_position(row, seat):
            return None
        with self._lock:
            return self._grid.get_status(row, seat)

    def get_available_seat_count(self) -> int:
        with self._lock:
            return self._grid.get_total_seats() - len(self._grid.booked_positions())

    def purchase(self, row_number: int, seat_number: int) -> PurchaseResult:
        """
        Book one seat by its 1-indexed row and seat number.
        Returns the charged price on success; rejected requests leave the grid untouched.
        """
        with self._lock:
            status = PurchaseValidator.validate(self._grid, row_number, seat_number)
            if status != PurchaseStatus.SUCCESS:
                result = PurchaseResult(status, row_number, seat_number)
            else:
                self._grid.set_booked(row_number - 1, seat_number - 1)
                result = PurchaseResult(status, row_number, seat_number,
                                        price=self.ticket_price(row_number))

        if result.is_success:
            self.notify_ticket_purchased(result)
        else:
            self.notify_purchase_rejected(result)
        return result

    def compute_statistics(self) -> StatisticsReport:
        with self._lock:
            return StatisticsCalculator.compute(self._grid, self._pricing)


# ==================== Factory ====================

class CinemaFactory:
    """Builds configured booking engines"""

    @staticmethod
    def create_engine(rows: int, seats_per_row: int, with_logging: bool = False,
                      pricing_config: Optional[PricingConfig] = None,
                      output: Callable[[str], None] = print) -> BookingEngine:
        grid = SeatGrid(rows, seats_per_row)
        engine = BookingEngine(grid, PricingPolicy(pricing_config))
        if with_logging:
            engine.add_listener(ConsoleLogger(output))
        return engine


# ==================== Console Driver ====================

class CinemaConsole:
    """Interactive menu loop on top of a BookingEngine"""

    MENU = ("\n1. Show the seats", "2. Buy a ticket", "3. Statistics", "0. Exit")

    def __init__(self, input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print,
                 verbose: bool = False):
        self._input = input_func
        self._output = output_func
        self._verbose = verbose
        self._engine: Optional[BookingEngine] = None

    def get_engine(self) -> Optional[BookingEngine]:
        return self._engine

    def _read_int(self, prompt: Optional[str]) -> Optional[int]:
        """Prompt for an integer; None when the reply is not one"""
        if prompt:
            self._output(prompt)
        try:
            return int(self._input("").strip())
        except ValueError:
            return None

    def _read_dimension(self, prompt: str) -> int:
        while True:
            value = self._read_int(prompt)
            if value is not None:
                return value
            self._output("Enter a valid number")

    def configure(self) -> BookingEngine:
        """Ask for the seating dimensions until they form a valid grid"""
        while True:
            rows = self._read_dimension("Enter the number of rows:")
            seats_per_row = self._read_dimension("Enter the number of seats in each row:")
            try:
                self._engine = CinemaFactory.create_engine(
                    rows, seats_per_row, with_logging=self._verbose, output=self._output
                )
                return self._engine
            except ConfigurationError as e:
                self._output(f"Invalid cinema size: {e}")

    def show_menu(self) -> None:
        for line in self.MENU:
            self._output(line)

    def _require_engine(self) -> BookingEngine:
        if self._engine is None:
            self.configure()
        return self._engine

    def show_seats(self) -> None:
        for line in self._require_engine().render():
            self._output(line)

    def buy_ticket(self) -> None:
        engine = self._require_engine()
        row_number = self._read_int("Enter a row number:")
        seat_number = self._read_int("Enter a seat number in that row:")
        if row_number is None or seat_number is None:
            self._output("Wrong input!")
            return

        result = engine.purchase(row_number, seat_number)
        if result.status == PurchaseStatus.SUCCESS:
            self._output(f"Ticket price: ${result.price}")
        elif result.status == PurchaseStatus.ALREADY_BOOKED:
            self._output("That ticket has already been purchased!")
        else:
            self._output("Wrong input!")

    def show_statistics(self) -> None:
        for line in self._require_engine().compute_statistics().to_lines():
            self._output(line)

    def run(self) -> None:
        self._require_engine()

        while True:
            self.show_menu()
            value = self._read_int(None)
            try:
                choice = MenuChoice(value)
            except ValueError:
                self._output("Enter a valid number")
                continue

            if choice == MenuChoice.EXIT:
                return
            if choice == MenuChoice.SHOW_SEATS:
                self.show_seats()
            elif choice == MenuChoice.BUY_TICKET:
                self.buy_ticket()
            elif choice == MenuChoice.STATISTICS:
                self.show_statistics()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Cinema seat booking console")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every purchase attempt",
    )
    args = parser.parse_args(argv)

    console = CinemaConsole(verbose=args.verbose)
    try:
        console.run()
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
