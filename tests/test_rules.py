import unittest

from setting_sun.game import (
    SUN_ID,
    Board,
    Direction,
    ExitRule,
    PieceNotFoundError,
    Square,
    SunSquare,
    VerticalRect,
    build_board,
    is_legal,
    legal_directions,
    legal_moves,
)


class TestMoveValidator(unittest.TestCase):
    def setUp(self):
        self.board = build_board()

    def test_initial_legal_moves(self):
        expected = {
            (0, Direction.DOWN),
            (2, Direction.DOWN),
            (3, Direction.LEFT),
            (3, Direction.RIGHT),
            (4, Direction.UP),
            (7, Direction.UP),
        }
        self.assertEqual(set(legal_moves(self.board)), expected)

    def test_sun_blocked_at_start(self):
        self.assertEqual(legal_directions(self.board, SUN_ID), [])
        self.assertTrue(self.board[SUN_ID].can_move(Direction.DOWN))

    def test_collision_in_bounds(self):
        # Square 5 can move up by bounds but the horizontal piece sits above it
        self.assertTrue(self.board[5].can_move(Direction.UP))
        self.assertFalse(is_legal(self.board, 5, Direction.UP))

    def test_direction_tokens(self):
        self.assertTrue(is_legal(self.board, 0, "down"))
        self.assertFalse(is_legal(self.board, 0, "up"))

    def test_unknown_piece(self):
        with self.assertRaises(PieceNotFoundError):
            is_legal(self.board, 42, Direction.UP)

    def test_moving_into_own_vacated_cell(self):
        board = Board([VerticalRect((0, 0), 0)])
        self.assertTrue(is_legal(board, 0, Direction.DOWN))

    def test_exit_move_ignores_bounds(self):
        board = Board([SunSquare((1, 3), SUN_ID), Square((0, 4), 5), Square((3, 4), 6)])
        self.assertFalse(board[SUN_ID].can_move(Direction.DOWN))
        self.assertTrue(is_legal(board, SUN_ID, Direction.DOWN))

    def test_sun_off_centre_cannot_leave(self):
        board = Board([SunSquare((0, 3), SUN_ID)])
        self.assertFalse(is_legal(board, SUN_ID, Direction.DOWN))
        self.assertTrue(is_legal(board, SUN_ID, Direction.RIGHT))


class TestExitRule(unittest.TestCase):
    def setUp(self):
        self.rule = ExitRule()
        self.sun = SunSquare((1, 3), SUN_ID)

    def test_winning_move(self):
        self.assertTrue(self.rule.is_winning_move(SUN_ID, self.sun, Direction.DOWN))

    def test_wrong_direction(self):
        for direction in (Direction.UP, Direction.LEFT, Direction.RIGHT):
            self.assertFalse(self.rule.is_winning_move(SUN_ID, self.sun, direction))

    def test_wrong_piece(self):
        self.assertFalse(self.rule.is_winning_move(5, Square((1, 3), 5), Direction.DOWN))

    def test_wrong_position(self):
        for pos in [(0, 3), (2, 3), (1, 2)]:
            self.assertFalse(self.rule.is_winning_move(SUN_ID, SunSquare(pos, SUN_ID), Direction.DOWN))

    def test_rule_built_from_plain_tokens(self):
        rule = ExitRule(exit_top_left=[1, 3], exit_direction="down")
        self.assertIs(rule.exit_direction, Direction.DOWN)
        self.assertTrue(rule.is_winning_move(SUN_ID, self.sun, "down"))
        self.assertTrue(rule.is_winning_move(SUN_ID, self.sun, Direction.DOWN))
        self.assertEqual(rule, ExitRule())

    def test_uses_pre_move_position(self):
        moved = self.sun.move(Direction.DOWN)
        self.assertFalse(self.rule.is_winning_move(SUN_ID, moved, Direction.DOWN))


if __name__ == "__main__":
    unittest.main()
