import unittest
from pypartition import PartitionLattice, Partition, set_partitions, bell_number, verify_join

class TestEnumeration(unittest.TestCase):
    """Test set partition enumeration and Bell numbers"""
    def test_bell_numbers(self):
        self.assertEqual([bell_number(n) for n in range(8)], [1, 1, 2, 5, 15, 52, 203, 877])
        with self.assertRaises(ValueError):
            bell_number(-1)

    def test_set_partitions(self):
        self.assertEqual(list(set_partitions([])), [[]])
        self.assertEqual(list(set_partitions(['a'])), [[['a']]])
        parts = list(set_partitions('abc'))
        self.assertEqual(len(parts), 5)
        self.assertEqual(len({Partition(p) for p in parts}), 5)

    def test_lattice_sizes(self):
        for n in range(6):
            self.assertEqual(len(PartitionLattice(range(n))), bell_number(n))
        self.assertEqual(len(PartitionLattice([1, 2, 3, 4])), 15)
        self.assertEqual(len(PartitionLattice(['•', '∗'])), 2)

    def test_order(self):
        L = PartitionLattice([1, 2, 3, 4])
        self.assertEqual(L.top, Partition.indiscrete([1, 2, 3, 4]))
        self.assertEqual(L.bottom, Partition.discrete([1, 2, 3, 4]))
        self.assertEqual([len(p) for p in L], sorted(len(p) for p in L))
        self.assertEqual({k: len(v) for k, v in L.levels().items()}, {1: 1, 2: 7, 3: 6, 4: 1})
        self.assertEqual(L[L.index([[1, 3], [2, 4]])], Partition([[1, 3], [2, 4]]))
        self.assertIn(Partition([[1, 2], [3, 4]]), L)
        self.assertNotIn(Partition([[1, 2], [3]]), L)


class TestCovers(unittest.TestCase):
    def test_two_elements(self):
        L = PartitionLattice(['•', '∗'])
        discrete, indiscrete = L.index([['•'], ['∗']]), L.index([['•', '∗']])
        self.assertEqual(L.relations(), [(discrete, indiscrete)])
        self.assertEqual(L.covers(), [(discrete, indiscrete)])

    def test_four_elements(self):
        L = PartitionLattice([1, 2, 3, 4])
        covers = L.covers(progress=False)
        self.assertEqual(len(covers), 31)
        self.assertTrue(all(i != j for i, j in covers))
        for i, j in covers:
            self.assertTrue(L[i] < L[j])
            self.assertEqual(len(L[i]), len(L[j]) + 1)
        # The order is the transitive closure of the covers
        closure = {(i, j) for i, j in covers}
        changed = True
        while changed:
            new = {(i, l) for i, j in closure for k, l in closure if j == k}
            changed = not new <= closure
            closure |= new
        self.assertEqual(closure, set(L.relations()))

    def test_singleton(self):
        L = PartitionLattice([1])
        self.assertEqual(len(L), 1)
        self.assertEqual(L.covers(), [])
        self.assertEqual(L.top, L.bottom)


class TestBounds(unittest.TestCase):
    def setUp(self):
        self.L = PartitionLattice([1, 2, 3, 4])

    def test_upper_bounds(self):
        a, b = Partition([[1, 2], [3, 4]]), Partition([[1, 3], [2, 4]])
        self.assertEqual(self.L.upper_bounds(a, b), [Partition([[1, 2, 3, 4]])])
        self.assertTrue(self.L.is_join(a | b, a, b))
        self.assertFalse(self.L.is_join(a, a, b))

    def test_lower_bounds(self):
        a, b = Partition([[1, 2, 3], [4]]), Partition([[1, 2], [3, 4]])
        self.assertEqual(set(self.L.lower_bounds(a, b)),
                         {Partition([[1, 2], [3], [4]]), Partition.discrete([1, 2, 3, 4])})
        self.assertTrue(self.L.is_meet(a & b, a, b))

    def test_verify_join(self):
        a, b = Partition([[1, 2], [3], [4]]), Partition([[1], [2], [3, 4]])
        check = verify_join(self.L, a, b)
        self.assertEqual(check.join, Partition([[1, 2], [3, 4]]))
        self.assertTrue(check.upper_bound)
        self.assertTrue(check.least)
        self.assertEqual(set(check.candidates), {Partition([[1, 2], [3, 4]]), Partition([[1, 2, 3, 4]])})


class TestView(unittest.TestCase):
    def test_digraph(self):
        L = PartitionLattice(['•', '∗'])
        g = L.view()
        self.assertEqual(g.name, 'hasse_2')
        self.assertIn('rankdir=BT', g.source)
        i, j = L.index([['•'], ['∗']]) + 1, L.index([['•', '∗']]) + 1
        self.assertIn(f'P{i} -> P{j}', g.source)
        self.assertIn('[[•, ∗]]', g.source)

    def test_str(self):
        lines = str(PartitionLattice([1, 2, 3])).splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[0].startswith('1 block: P1 [[1, 2, 3]]'))
        self.assertTrue(lines[-1].startswith('3 blocks:'))

if __name__ == "__main__":
    unittest.main()
