import unittest
from pypartition import PartitionLattice, Partition, shares_block, is_monotone, generative_effect, boolean_join

class TestMonotone(unittest.TestCase):
    """Test monotone maps and generative effects"""
    def test_boolean_join(self):
        self.assertEqual([boolean_join(a, b) for a, b in [(True, False), (False, True), (True, True), (False, False)]],
                         [True, True, True, False])

    def test_shares_block(self):
        phi = shares_block(1, 2)
        self.assertTrue(phi(Partition([[1, 2], [3]])))
        self.assertFalse(phi(Partition([[1, 3], [2]])))
        self.assertEqual(phi.__name__, "shares_block(1, 2)")

    def test_is_monotone(self):
        L = PartitionLattice([1, 2, 3, 4])
        self.assertTrue(is_monotone(shares_block(1, 2), L))
        self.assertTrue(is_monotone(lambda p: len(p) <= 2, L))
        self.assertFalse(is_monotone(lambda p: len(p) >= 2, L))

    def test_generative_effect(self):
        effect = generative_effect(shares_block(1, 2), [[1, 3], [2]], [[1], [2, 3]])
        self.assertFalse(effect.phi_p)
        self.assertFalse(effect.phi_q)
        self.assertTrue(effect.phi_join)
        self.assertEqual(effect.join, Partition([[1, 2, 3]]))
        self.assertTrue(effect.inequality_holds)
        self.assertTrue(effect.generative)
        self.assertIn("Φ(A) ∨ Φ(B) ≤ Φ(A ∨ B): True", str(effect))

    def test_no_generative_effect(self):
        effect = generative_effect(shares_block('•', '∗'), [['•'], ['∗']], [['•'], ['∗']])
        self.assertFalse(effect.phi_join)
        self.assertTrue(effect.inequality_holds)
        self.assertFalse(effect.generative)

    def test_inequality_holds_everywhere(self):
        L = PartitionLattice([1, 2, 3, 4])
        phi = shares_block(2, 4)
        for p in L:
            for q in L:
                self.assertTrue(generative_effect(phi, p, q).inequality_holds)

if __name__ == "__main__":
    unittest.main()
