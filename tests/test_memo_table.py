import unittest

from lattice.errors import MemoInvariantError, StateOutOfBoundsError
from lattice.memo import DEAD, UNKNOWN, MemoTable
from lattice.state import ORIGIN, LatticeState


class MemoTableTest(unittest.TestCase):
    def test_cells_start_unknown(self) -> None:
        memo = MemoTable((2, 3, 4))
        self.assertEqual(memo.status(ORIGIN), UNKNOWN)
        self.assertEqual(memo.status(LatticeState(1, 2, 3)), UNKNOWN)
        self.assertEqual(memo.dead_count(), 0)

    def test_mark_dead_once(self) -> None:
        memo = MemoTable((2, 2, 2))
        s = LatticeState(1, 0, 1)
        memo.mark_dead(s)
        self.assertTrue(memo.is_dead(s))
        self.assertEqual(memo.status(s), DEAD)
        self.assertFalse(memo.is_dead(ORIGIN))
        with self.assertRaises(MemoInvariantError):
            memo.mark_dead(s)

    def test_out_of_bounds(self) -> None:
        memo = MemoTable((2, 2, 2))
        with self.assertRaises(StateOutOfBoundsError):
            memo.is_dead(LatticeState(2, 0, 0))
        with self.assertRaises(StateOutOfBoundsError):
            memo.mark_dead(LatticeState(0, -1, 0))

    def test_reset_clears_dead_marks(self) -> None:
        memo = MemoTable((3, 3, 3))
        memo.mark_dead(ORIGIN)
        memo.mark_dead(LatticeState(2, 2, 2))
        self.assertEqual(memo.dead_count(), 2)
        memo.reset()
        self.assertEqual(memo.dead_count(), 0)
        memo.mark_dead(ORIGIN)

    def test_bad_shape(self) -> None:
        with self.assertRaises(ValueError):
            MemoTable((0, 1, 1))


if __name__ == "__main__":
    unittest.main()
