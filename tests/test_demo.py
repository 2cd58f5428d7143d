import unittest

from falling_blocks.demo import build_parser, run_game_demo
from falling_blocks.game import BOARD_HEIGHT, BOARD_WIDTH


class TestDemo(unittest.TestCase):
    def test_given_seed_when_running_demo_then_game_is_reproducible(self):
        a = run_game_demo(steps=300, seed=5)
        b = run_game_demo(steps=300, seed=5)
        self.assertEqual(a.board_with_piece().shape, (BOARD_HEIGHT, BOARD_WIDTH))
        self.assertTrue((a.board_with_piece() == b.board_with_piece()).all())
        self.assertEqual(a.state.score, b.state.score)

    def test_given_no_arguments_when_parsing_then_defaults_used(self):
        args = build_parser().parse_args([])
        self.assertEqual(args.steps, 500)
        self.assertEqual(args.seed, 0)
        self.assertFalse(args.verbose)


if __name__ == "__main__":
    unittest.main()
