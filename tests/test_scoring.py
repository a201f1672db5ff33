"""Tests for move scoring."""

from scrabbler.move import Move, PlacedTile
from scrabbler.scoring import score_across, score_move


def across(row, col, letters):
    """Tiles for *letters* placed left to right; lowercase marks a blank."""
    return [
        PlacedTile(row, col + i, ch.upper(), ch.islower())
        for i, ch in enumerate(letters)
    ]


class TestBasics:
    """Letter values and letter bonuses."""

    def test_empty_placement(self, grid_factory, values):
        assert score_across(grid_factory(3, 3), [], values) == 0

    def test_plain_word(self, grid_factory, values):
        assert score_across(grid_factory(3, 5), across(1, 0, "CAT"), values) == 5

    def test_double_letter(self, grid_factory, values):
        grid = grid_factory(3, 5, bonuses={(1, 1): "l"})
        assert score_across(grid, across(1, 0, "CAT"), values) == 6

    def test_triple_letter(self, grid_factory, values):
        grid = grid_factory(3, 5, bonuses={(1, 0): "L"})
        assert score_across(grid, across(1, 0, "CAT"), values) == 11

    def test_blank_is_worth_nothing(self, grid_factory, values):
        grid = grid_factory(3, 5, bonuses={(1, 0): "L"})
        assert score_across(grid, across(1, 0, "cAT"), values) == 2

    def test_deterministic(self, grid_factory, values):
        grid = grid_factory(3, 5, bonuses={(1, 1): "w"}, letters={(0, 1): "A"})
        tiles = across(1, 0, "CAT")
        first = score_across(grid, tiles, values)
        assert [score_across(grid, tiles, values) for _ in range(3)] == [first] * 3
        assert grid.at(1, 0).letter is None


class TestWordBonuses:
    """Word multipliers compound."""

    def test_double_and_triple_multiply(self, grid_factory, values):
        grid = grid_factory(3, 5, bonuses={(1, 0): "w", (1, 2): "W"})
        assert score_across(grid, across(1, 0, "CAT"), values) == 5 * 6

    def test_two_doubles(self, grid_factory, values):
        grid = grid_factory(3, 5, bonuses={(1, 0): "w", (1, 2): "w"})
        assert score_across(grid, across(1, 0, "CAT"), values) == 5 * 4

    def test_letter_bonus_before_word_bonus(self, grid_factory, values):
        grid = grid_factory(3, 5, bonuses={(1, 0): "l", (1, 1): "w"})
        assert score_across(grid, across(1, 0, "CAT"), values) == (6 + 1 + 1) * 2

    def test_covered_bonus_squares_do_not_count(self, grid_factory, values):
        grid = grid_factory(3, 5, bonuses={(1, 1): "W"}, letters={(1, 1): "A"})
        tiles = [PlacedTile(1, 0, "C"), PlacedTile(1, 2, "T")]
        assert score_across(grid, tiles, values) == 5


class TestBoardLetters:
    """Letters already on the board join the main word at face value."""

    def test_prefix_between_and_suffix(self, grid_factory, values):
        grid = grid_factory(1, 7, letters={(0, 0): "S", (0, 2): "A", (0, 5): "S"})
        # S C A T E S, with S, A and the last S already down
        tiles = [PlacedTile(0, 1, "C"), PlacedTile(0, 3, "T"), PlacedTile(0, 4, "E")]
        assert score_across(grid, tiles, values) == 1 + 3 + 1 + 1 + 1 + 1

    def test_board_blank_counts_zero(self, grid_factory, values):
        grid = grid_factory(1, 5, letters={(0, 1): "a"})
        tiles = [PlacedTile(0, 0, "C"), PlacedTile(0, 2, "T")]
        assert score_across(grid, tiles, values) == 4


class TestCrossWords:
    """Perpendicular words formed by single new tiles."""

    def test_cross_word_added(self, grid_factory, values):
        grid = grid_factory(3, 5, letters={(0, 1): "A"})
        # CAT on row 1 also makes AA down column 1
        assert score_across(grid, across(1, 0, "CAT"), values) == 5 + 2

    def test_cross_word_takes_own_square_bonuses(self, grid_factory, values):
        grid = grid_factory(3, 5, bonuses={(1, 1): "w"}, letters={(0, 1): "A"})
        assert score_across(grid, across(1, 0, "CAT"), values) == 5 * 2 + 2 * 2

    def test_cross_word_letter_bonus(self, grid_factory, values):
        grid = grid_factory(3, 5, bonuses={(1, 0): "L"}, letters={(0, 0): "O", (2, 0): "X"})
        # C on a triple letter: main 9+1+1, cross O+C+X = 1+9+8
        assert score_across(grid, across(1, 0, "CAT"), values) == 11 + 18

    def test_other_word_bonuses_do_not_touch_cross_word(self, grid_factory, values):
        grid = grid_factory(3, 5, bonuses={(1, 2): "W"}, letters={(0, 1): "A"})
        assert score_across(grid, across(1, 0, "CAT"), values) == 5 * 3 + 2


class TestBingo:
    """Seven tiles earn a flat 50."""

    def test_seven_tiles(self, grid_factory, values):
        grid = grid_factory(1, 9)
        assert score_across(grid, across(0, 0, "RETAINS"), values) == 7 + 50

    def test_six_tiles(self, grid_factory, values):
        grid = grid_factory(1, 9)
        assert score_across(grid, across(0, 0, "RETAIN"), values) == 6

    def test_bonus_not_multiplied(self, grid_factory, values):
        grid = grid_factory(1, 9, bonuses={(0, 0): "W"})
        assert score_across(grid, across(0, 0, "RETAINS"), values) == 7 * 3 + 50


class TestVertical:
    """Vertical moves score through the transposed board."""

    def test_matches_horizontal(self, grid_factory, values):
        grid = grid_factory(5, 3, bonuses={(0, 1): "w"}, letters={(1, 0): "A"})
        tiles = [PlacedTile(r, 1, ch) for r, ch in zip(range(3), "CAT")]
        move = Move(tiles, 0, "V")
        expected = score_across(grid.transposed(), [t.transposed() for t in tiles], values)
        assert score_move(grid, move, values) == expected == 5 * 2 + 2

    def test_horizontal_passthrough(self, grid_factory, values):
        grid = grid_factory(3, 5)
        assert score_move(grid, Move(across(1, 0, "CAT")), values) == 5
