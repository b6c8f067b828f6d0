"""
Tests for input sources and random tile placement.
"""

from io import StringIO
from unittest import TestCase, main
from unittest.mock import patch

import numpy as np

from tilt2048.core.gameboard import Board
from tilt2048.core.placement import place_random_tile
from tilt2048.utils.sources import (
    InputExhausted,
    InteractiveSource,
    RecordingSource,
    ScriptedSource,
    TileGenerator,
    read_stdin_command,
)


class TestScriptedSource(TestCase):
    """Test replaying a script."""

    def test_tiles_and_commands(self):
        source = ScriptedSource(StringIO('2 0 1\n# comment\n\nUp\n4 3 3\nNew Game\n'))

        self.assertEqual(source.next_random_tile(), (2, 0, 1))
        self.assertEqual(source.next_command(), 'Up')
        self.assertEqual(source.next_random_tile(), (4, 3, 3))
        self.assertEqual(source.next_command(), 'New Game')

    def test_exhausted(self):
        source = ScriptedSource(StringIO('Up\n'))
        source.next_command()
        with self.assertRaises(InputExhausted):
            source.next_command()

        # ##>: Exhaustion is an end of file.
        self.assertTrue(issubclass(InputExhausted, EOFError))

    def test_command_where_tile_expected(self):
        source = ScriptedSource(StringIO('Up\n'))
        with self.assertRaises(ValueError):
            source.next_random_tile()

    def test_tile_where_command_expected(self):
        source = ScriptedSource(StringIO('2 0 0\n'))
        with self.assertRaises(ValueError):
            source.next_command()

    def test_malformed_tile(self):
        for line in ['2 0\n', '2 0 x\n', '2 0 1 3\n']:
            with self.assertRaises(ValueError):
                ScriptedSource(StringIO(line)).next_random_tile()


class TestTileGenerator(TestCase):
    """Test seeded random tiles."""

    def test_values_and_positions(self):
        generator = TileGenerator(size=4, seed=7)
        tiles = [generator() for _ in range(500)]

        self.assertTrue(all(value in (2, 4) for value, _, _ in tiles))
        self.assertTrue(all(0 <= row < 4 and 0 <= col < 4 for _, row, col in tiles))

        # ##>: Mostly twos.
        twos = sum(value == 2 for value, _, _ in tiles)
        self.assertGreater(twos, 400)

    def test_seed_reproducibility(self):
        first = TileGenerator(size=4, seed=42)
        second = TileGenerator(size=4, seed=42)
        self.assertEqual([first() for _ in range(20)], [second() for _ in range(20)])


class TestInteractiveSource(TestCase):
    def test_commands_from_callable(self):
        commands = iter(['Left', 'Quit'])
        source = InteractiveSource(lambda: next(commands), size=4, seed=1)

        self.assertEqual(source.next_command(), 'Left')
        self.assertEqual(source.next_command(), 'Quit')
        value, row, col = source.next_random_tile()
        self.assertIn(value, (2, 4))


class TestRecordingSource(TestCase):
    def test_log_replays(self):
        """A recorded log is a valid script for the same game."""
        log = StringIO()
        recorder = RecordingSource(ScriptedSource(StringIO('2 1 1\nRight\n4 0 0\nQuit\n')), log)
        recorded = [recorder.next_random_tile(), recorder.next_command(), recorder.next_random_tile()]
        recorded.append(recorder.next_command())

        self.assertEqual(log.getvalue(), '2 1 1\nRight\n4 0 0\nQuit\n')

        replay = ScriptedSource(StringIO(log.getvalue()))
        replayed = [replay.next_random_tile(), replay.next_command(), replay.next_random_tile()]
        replayed.append(replay.next_command())
        self.assertEqual(recorded, replayed)


class TestReadStdin(TestCase):
    def test_reads_a_line(self):
        with patch('sys.stdin', StringIO('Down\n')):
            self.assertEqual(read_stdin_command(), 'Down')

    def test_end_of_input(self):
        with patch('sys.stdin', StringIO('')):
            with self.assertRaises(InputExhausted):
                read_stdin_command()


class TestPlacement(TestCase):
    """Test placing random tiles on a board."""

    def test_retries_until_empty(self):
        board = Board(size=4)
        board.set(0, 0, 2)
        source = ScriptedSource(StringIO('4 0 0\n2 0 0\n4 2 3\n'))

        self.assertEqual(place_random_tile(board, source), (4, 2, 3))
        self.assertEqual(board.get(2, 3), 4)
        self.assertEqual(board.get(0, 0), 2)
        self.assertEqual(board.occupied_count(), 2)

    def test_full_board_is_a_no_op(self):
        """A full board never asks the source for a tile."""
        board = Board(size=2)
        board.apply(np.array([[2, 4], [4, 2]]))
        source = ScriptedSource(StringIO(''))

        self.assertIsNone(place_random_tile(board, source))
        self.assertEqual(source.line_number, 0)

    def test_out_of_range_candidate(self):
        board = Board(size=4)
        with self.assertRaises(IndexError):
            place_random_tile(board, ScriptedSource(StringIO('2 4 0\n')))

    def test_invalid_value(self):
        board = Board(size=4)
        with self.assertRaises(ValueError):
            place_random_tile(board, ScriptedSource(StringIO('3 0 0\n')))

    def test_exhausted_source(self):
        board = Board(size=4)
        board.set(1, 1, 2)
        with self.assertRaises(InputExhausted):
            place_random_tile(board, ScriptedSource(StringIO('2 1 1\n')))

    def test_fills_board_with_generator(self):
        """Random placement eventually fills every cell."""
        board = Board(size=4)
        source = InteractiveSource(lambda: 'Quit', size=4, seed=3)
        for _ in range(16):
            self.assertIsNotNone(place_random_tile(board, source))
        self.assertTrue(board.is_full())
        self.assertIsNone(place_random_tile(board, source))


if __name__ == '__main__':
    main()
