import pytest
from cinema_booking import CinemaConfig, ConfigurationError, SeatGrid, SeatStatus


def test_new_grid_is_all_available():
    grid = SeatGrid(3, 4)

    assert grid.get_rows() == 3
    assert grid.get_seats_per_row() == 4
    assert grid.get_total_seats() == 12
    assert grid.booked_positions() == []
    assert all(
        grid.get_status(row, seat) == SeatStatus.AVAILABLE
        for row in range(3) for seat in range(4)
    )


@pytest.mark.parametrize("rows, seats", [(0, 5), (5, 0), (-1, 3), (3, -2), (0, 0)])
def test_non_positive_dimensions_rejected(rows, seats):
    with pytest.raises(ConfigurationError):
        SeatGrid(rows, seats)


@pytest.mark.parametrize("rows, seats", [("3", 4), (3, 4.0), (True, 4)])
def test_non_integer_dimensions_rejected(rows, seats):
    with pytest.raises(ConfigurationError):
        CinemaConfig(rows, seats)


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_set_booked_uses_zero_based_positions():
    grid = SeatGrid(2, 2)
    grid.set_booked(1, 0)

    assert grid.is_booked(1, 0)
    assert not grid.is_booked(0, 0)
    assert grid.booked_positions() == [(1, 0)]


def test_accessors_reject_positions_outside_grid():
    grid = SeatGrid(2, 2)

    with pytest.raises(ValueError):
        grid.set_booked(2, 0)
    with pytest.raises(ValueError):
        grid.is_booked(0, -1)


def test_render_layout():
    grid = SeatGrid(3, 4)
    grid.set_booked(0, 0)
    grid.set_booked(2, 3)

    assert grid.render() == [
        "Cinema:",
        "  1 2 3 4 ",
        "1 B S S S ",
        "2 S S S S ",
        "3 S S S B ",
    ]
