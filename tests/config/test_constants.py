from cavern_pcg.config.constants import (
    AGENT_STEPS_PER_WALK,
    AGENT_WALKS,
    CA_RADIUS,
    CA_THRESHOLD,
    DIRECTION_PROBABILITY_RESET,
    GRID_HEIGHT,
    GRID_WIDTH,
    HEADINGS,
    INITIAL_HEADING,
    MIN_ROOM_SIZE,
    NUM_ITERATIONS,
    ROOM_MAX_HEIGHT,
    ROOM_MAX_WIDTH,
    ROOM_PROBABILITY_RESET,
)


def test_grid_dimensions_are_positive_ints() -> None:
    assert isinstance(GRID_WIDTH, int) and GRID_WIDTH > 0
    assert isinstance(GRID_HEIGHT, int) and GRID_HEIGHT > 0


def test_default_window_fits_inside_grid() -> None:
    assert 2 * CA_RADIUS + 1 < min(GRID_WIDTH, GRID_HEIGHT)
    assert 0.0 <= CA_THRESHOLD <= 1.0


def test_agent_defaults_are_non_negative() -> None:
    assert AGENT_WALKS >= 0
    assert AGENT_STEPS_PER_WALK >= 0
    assert NUM_ITERATIONS >= 0


def test_room_bounds_respect_minimum() -> None:
    assert ROOM_MAX_WIDTH >= MIN_ROOM_SIZE
    assert ROOM_MAX_HEIGHT >= MIN_ROOM_SIZE


def test_reset_baselines_are_fixed_literals() -> None:
    assert ROOM_PROBABILITY_RESET == 0.1
    assert DIRECTION_PROBABILITY_RESET == 0.2


def test_headings_are_four_unit_axis_vectors() -> None:
    assert len(set(HEADINGS)) == 4
    for dx, dy in HEADINGS:
        assert abs(dx) + abs(dy) == 1
    assert INITIAL_HEADING == (1, 0)
    assert INITIAL_HEADING in HEADINGS
