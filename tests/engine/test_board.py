import pytest
from tests.test_utils import BoardScenario

from camel_up_calculator.core.errors import BoardConsistencyError, LayoutParseError
from camel_up_calculator.core.move import Move
from camel_up_calculator.core.types import Color, SpaceKind
from camel_up_calculator.engine.board import Board, Space, parse_layout_tokens

R, Y, U, G, P = Color.RED, Color.YELLOW, Color.BLUE, Color.GREEN, Color.PURPLE
W, B = Color.WHITE, Color.BLACK


# --- Layout parsing ---
def test_layout_lists_stack_top_to_bottom(scenario: type[BoardScenario]):
    game = scenario([(3, "RgU")])
    space = game.board.space_at(3)
    assert space is not None
    assert space.kind is SpaceKind.CAMEL
    # stored bottom to top
    assert space.camels == [U, G, R]
    assert space.height == 3


def test_layout_bump_tokens():
    board = Board.from_layout([(4, "<"), (9, ">")])
    assert board.space_at(4) == Space.bump_space(4, -1)
    assert board.space_at(9) == Space.bump_space(9, 1)
    assert board.space_at(9).height == 1


def test_layout_rejects_unknown_character():
    with pytest.raises(LayoutParseError, match="Unrecognized character"):
        _ = Board.from_layout([(1, "RX")])


def test_layout_rejects_duplicate_index():
    with pytest.raises(LayoutParseError):
        _ = Board.from_layout([(1, "R"), (1, "Y")])


def test_layout_rejects_empty_token():
    with pytest.raises(LayoutParseError):
        _ = Board.from_layout([(1, "  ")])


def test_layout_rejects_bump_token_with_trailing_camels():
    with pytest.raises(LayoutParseError, match="single character"):
        _ = Board.from_layout([(4, "<R")])


def test_layout_rejects_camel_twice_in_one_stack():
    with pytest.raises(LayoutParseError, match="Red is listed twice"):
        _ = Board.from_layout([(1, "RR")])


def test_layout_rejects_camel_on_two_spaces():
    with pytest.raises(BoardConsistencyError, match="Red is already on space 1"):
        _ = Board.from_layout([(1, "R"), (3, "R")])


def test_add_space_rejects_repeated_camel_in_stack():
    board = Board()
    with pytest.raises(BoardConsistencyError, match="appears twice"):
        board.add_space(Space.camel_space(2, [R, Y, R]))
    assert board.spaces == {}


def test_layout_rejects_adjacent_bumps_pointing_at_each_other():
    with pytest.raises(BoardConsistencyError):
        _ = Board.from_layout([(3, ">"), (4, "<")])


def test_parse_layout_tokens():
    assert parse_layout_tokens(["1:Y", " 8 :<", "3:RG"]) == [
        (1, "Y"),
        (8, "<"),
        (3, "RG"),
    ]
    with pytest.raises(LayoutParseError):
        _ = parse_layout_tokens(["1Y"])
    with pytest.raises(LayoutParseError):
        _ = parse_layout_tokens(["one:Y"])


# --- Racing order ---
def test_starting_racing_order(starting_board: BoardScenario):
    assert starting_board.order() == [R, U, G, P, Y]


def test_racing_order_reads_stacks_top_down_and_skips_crazy_camels(
    scenario: type[BoardScenario],
):
    game = scenario([(2, "YWU"), (5, "BR"), (7, "G")])
    assert game.order() == [G, R, Y, U]


def test_racing_order_never_contains_crazy_camels(scenario: type[BoardScenario]):
    game = scenario([(1, "WR"), (4, "B")])
    assert game.order() == [R]


# --- Moving racing camels ---
def test_single_camel_moves_forward(scenario: type[BoardScenario]):
    game = scenario([(1, "Y")]).move(Y, 3)
    assert game.stack_at(1) is None
    assert game.stack_at(4) == [Y]


def test_camel_carries_everything_above_it(scenario: type[BoardScenario]):
    game = scenario([(3, "RGU")]).move(G, 2)
    assert game.stack_at(3) == [U]
    assert game.stack_at(5) == [R, G]


def test_landing_camels_go_on_top(scenario: type[BoardScenario]):
    game = scenario([(3, "U"), (5, "RY")]).move(U, 2)
    assert game.stack_at(5) == [U, R, Y]
    assert game.order() == [U, R, Y]


def test_empty_source_space_is_removed(scenario: type[BoardScenario]):
    game = scenario([(3, "RG")]).move(G, 1)
    assert 3 not in game.board.spaces
    assert game.stack_at(4) == [R, G]


def test_zero_move_keeps_stack_order(scenario: type[BoardScenario]):
    game = scenario([(3, "RGU")]).move(G, 0)
    assert game.stack_at(3) == [R, G, U]


def test_moving_missing_camel_is_fatal(scenario: type[BoardScenario]):
    game = scenario([(3, "R")])
    with pytest.raises(BoardConsistencyError, match="No camel found"):
        _ = game.move(G, 1)


# --- Bump spaces ---
def test_red_bumped_back_onto_black(starting_board: BoardScenario):
    starting_board.move(R, 3)
    assert starting_board.stack_at(5) is None
    assert starting_board.board.space_at(8).kind is SpaceKind.BUMP
    assert starting_board.stack_at(7) == [R, B]


def test_forward_bump_pushes_racing_camel_ahead(scenario: type[BoardScenario]):
    game = scenario([(6, "U"), (9, ">")]).move(U, 3)
    assert game.stack_at(10) == [U]


def test_bump_direction_is_inverted_for_crazy_camels(scenario: type[BoardScenario]):
    game = scenario([(5, "W"), (3, ">")]).move(W, 2)
    assert game.stack_at(2) == [W]


def test_bump_onto_another_bump_is_fatal(scenario: type[BoardScenario]):
    # 9 bumps racing camels forward to 10, but a crazy camel is sent back to 8.
    game = scenario([(11, "W"), (8, "<"), (9, ">")])
    with pytest.raises(BoardConsistencyError, match="adjacent bump"):
        _ = game.move(W, 2)


# --- Crazy camels ---
def test_crazy_camel_moves_backwards(scenario: type[BoardScenario]):
    game = scenario([(6, "W"), (7, "B")]).move(B, 3)
    assert game.stack_at(4) == [B]
    assert game.stack_at(6) == [W]


def test_crazy_camel_with_riders_must_move(scenario: type[BoardScenario]):
    """White carries Red, Black carries nobody: rolling Black moves White."""
    game = scenario([(6, "RW"), (8, "B")]).move(B, 1)
    assert game.stack_at(5) == [R, W]
    assert game.stack_at(8) == [B]
    assert game.stack_at(6) is None


def test_crazy_camel_on_top_of_other_crazy_camel_must_move(
    scenario: type[BoardScenario],
):
    """Black sits directly on White: rolling White moves Black."""
    game = scenario([(6, "BW")]).move(W, 2)
    assert game.stack_at(4) == [B]
    assert game.stack_at(6) == [W]


def test_on_top_rule_overrides_riders_rule(scenario: type[BoardScenario]):
    """Black on White with Red on top: both carry riders, Black is on top."""
    game = scenario([(6, "RBW")]).move(W, 1)
    assert game.stack_at(5) == [R, B]
    assert game.stack_at(6) == [W]


def test_nominal_crazy_camel_moves_when_no_rule_applies(
    scenario: type[BoardScenario],
):
    game = scenario([(6, "W"), (7, "B"), (2, "R")]).move(W, 1)
    assert game.stack_at(5) == [W]
    assert game.stack_at(7) == [B]


def test_crazy_camel_carries_riders_backwards_onto_stack(
    scenario: type[BoardScenario],
):
    game = scenario([(7, "YB"), (5, "U"), (6, "W")]).move(W, 2)
    # White has no riders, Black carries Yellow: Black moves 7 -> 5.
    assert game.stack_at(5) == [Y, B, U]
    assert game.stack_at(6) == [W]
    assert game.order() == [Y, U]


# --- Copies ---
def test_clone_is_independent(starting_board: BoardScenario):
    original = starting_board.board
    copy = original.clone()
    assert copy == original

    copy.apply_move(Move(R, 1))
    assert copy != original
    assert original.space_at(5).camels == [R]
    assert original.space_at(6).camels == [W]


def test_replaying_moves_on_equal_boards_gives_equal_boards(
    scenario: type[BoardScenario],
):
    moves = [Move(R, 3), Move(U, 2), Move(W, 1), Move(Y, 3), Move(B, 2)]
    first = scenario([(1, "Y"), (4, "U"), (5, "R"), (6, "W"), (7, "B"), (8, "<")])
    second = scenario([(1, "Y"), (4, "U"), (5, "R"), (6, "W"), (7, "B"), (8, "<")])

    for move in moves:
        first.board.apply_move(move)
        second.board.apply_move(move)

    assert first.board == second.board


def test_board_queries(scenario: type[BoardScenario]):
    game = scenario([(2, "RY"), (5, "<"), (7, "GWU")])
    board = game.board
    assert board.min_index == 2
    assert board.max_index == 7
    assert board.tallest_stack == 3
    assert board.camels == [Y, R, U, W, G]
    assert board.riders(W) == [G]
    assert board.riders(Y) == [R]
    assert board.riders(B) == []
    assert board.find_space(U) is board.space_at(7)
