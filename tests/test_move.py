from unittest import TestCase, main

from numpy import array

from game2048.core.gamemove import Direction, can_move, illegal_directions, legal_directions, parse_direction


class TestGameMove(TestCase):
    def test_illegal_directions(self):
        """
        Test if illegal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(set(illegal_directions(board)), {Direction.LEFT})

    def test_legal_directions(self):
        """
        Test if legal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(set(legal_directions(board)), {Direction.UP, Direction.DOWN, Direction.RIGHT})

    def test_blocked_board(self):
        board = array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertEqual(legal_directions(board), [])
        self.assertEqual(set(illegal_directions(board)), set(Direction))

    def test_merge_only_move(self):
        """
        A full row with an equal pair can move both ways.
        """
        board = array([[2, 2, 4, 8], [4, 8, 16, 32], [8, 16, 32, 64], [16, 32, 64, 128]])
        self.assertTrue(can_move(board, Direction.LEFT))
        self.assertTrue(can_move(board, Direction.RIGHT))
        self.assertFalse(can_move(board, Direction.UP))
        self.assertFalse(can_move(board, Direction.DOWN))


class TestParseDirection(TestCase):
    def test_names(self):
        self.assertIs(parse_direction('left'), Direction.LEFT)
        self.assertIs(parse_direction(' Up '), Direction.UP)
        self.assertIs(parse_direction(Direction.DOWN), Direction.DOWN)

    def test_unknown_values(self):
        for value in ('diagonal', '', None, 0, 3.5):
            self.assertIsNone(parse_direction(value))


if __name__ == '__main__':
    main()
