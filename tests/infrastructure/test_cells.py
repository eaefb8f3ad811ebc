import threading
import unittest
from unittest import TestCase

from ndcell.domain._cell import ICell
from ndcell.infrastructure._config import config_override
from ndcell.infrastructure.cells._cell import (
    Cell,
    LockedCell,
    new_cell,
    new_cells,
    read_all,
)


class TestCell(TestCase):
    def test_read_write(self):
        c = Cell(1)
        self.assertEqual(c.read(), 1)
        c.write(7)
        self.assertEqual(c.read(), 7)

    def test_satisfies_protocol(self):
        self.assertIsInstance(Cell(0), ICell)
        self.assertIsInstance(LockedCell(0), ICell)

    def test_clone_is_independent(self):
        c = Cell(3)
        d = c.clone()
        self.assertIsNot(c, d)
        self.assertEqual(d.read(), 3)
        d.write(4)
        self.assertEqual(c.read(), 3)

    def test_clone_preserves_flavour(self):
        self.assertIs(type(LockedCell(1).clone()), LockedCell)
        self.assertIs(type(Cell(1).clone()), Cell)

    def test_repr(self):
        self.assertEqual(repr(Cell(2.5)), "Cell(2.5)")


class TestCellFactories(TestCase):
    def test_new_cell_defaults_to_plain(self):
        with config_override(thread_safe=False):
            self.assertIs(type(new_cell(0)), Cell)

    def test_new_cell_honours_config(self):
        with config_override(thread_safe=True):
            self.assertIs(type(new_cell(0)), LockedCell)

    def test_explicit_flavour_overrides_config(self):
        with config_override(thread_safe=True):
            self.assertIs(type(new_cell(0, thread_safe=False)), Cell)

    def test_new_cells_are_distinct(self):
        cells = new_cells([1, 1, 1])
        self.assertEqual(len({id(c) for c in cells}), 3)
        self.assertEqual(read_all(cells), [1, 1, 1])


class TestLockedCellConcurrency(TestCase):
    def test_concurrent_writers_leave_a_written_value(self):
        cell = LockedCell(0)
        values = list(range(1, 9))

        def worker(v):
            for _ in range(200):
                cell.write(v)
                cell.read()

        threads = [threading.Thread(target=worker, args=(v,)) for v in values]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertIn(cell.read(), values)


if __name__ == "__main__":
    unittest.main()
