#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

import hashset.common.unittest as unittest

from hashset import of
from hashset.common.sorting import sorted_robust, _robust_sort_keyfcn


class NoStr(object):
    def __init__(self, val):
        self.val = val

    def __str__(self):
        raise RuntimeError("no str")


class Named(object):
    def __init__(self, name):
        self.name = name

    def __str__(self):
        return self.name


class TestSortedRobust(unittest.TestCase):
    def test_comparable(self):
        self.assertEqual(sorted_robust([3, 1, 2]), [1, 2, 3])
        self.assertEqual(sorted_robust(['b', 'a']), ['a', 'b'])
        self.assertEqual(sorted_robust([3, 1, 2], reverse=True), [3, 2, 1])
        self.assertEqual(sorted_robust(['ccc', 'a', 'bb'], key=len), ['a', 'bb', 'ccc'])

    def test_generator(self):
        self.assertEqual(sorted_robust(i for i in (3, 1, 2)), [1, 2, 3])
        self.assertEqual(sorted_robust(x for x in (2, 'a', 1)), [1, 2, 'a'])

    def test_mixed_types(self):
        data = ['a', (1, 'b'), 2, None, (1, 2), 1.5]
        self.assertEqual(
            sorted_robust(data), [None, 1.5, 2, 'a', (1, 2), (1, 'b')]
        )
        self.assertEqual(
            sorted_robust(data, reverse=True),
            [(1, 'b'), (1, 2), 'a', 2, 1.5, None],
        )

    def test_by_string(self):
        data = [Named('b'), 1, Named('a')]
        ans = sorted_robust(data)
        # 'Named' sorts before 'float' (uppercase first)
        self.assertEqual([str(x) for x in ans[:2]], ['a', 'b'])
        self.assertEqual(ans[2], 1)

    def test_by_id(self):
        a, b = NoStr(1), NoStr(2)
        ans = sorted_robust([b, a, 'x'])
        self.assertEqual(ans[0:2], sorted([a, b], key=id))
        self.assertEqual(ans[2], 'x')

    def test_keyfcn(self):
        keyfcn = _robust_sort_keyfcn()
        self.assertEqual(keyfcn(1), ('float', 1))
        self.assertEqual(keyfcn('a'), ('str', 'a'))
        self.assertEqual(keyfcn((1, 'a')), ('tuple', (('float', 1), ('str', 'a'))))
        keyfcn = _robust_sort_keyfcn(key=abs)
        self.assertEqual(keyfcn(-2), ('float', 2))

    def test_partially_ordered(self):
        fs = [frozenset([2]), frozenset([1, 3]), frozenset([1])]
        ans = [frozenset([1]), frozenset([1, 3]), frozenset([2])]
        self.assertEqual(sorted_robust(fs), ans)
        self.assertEqual(sorted_robust(reversed(fs)), ans)
        self.assertEqual(sorted_robust(fs, reverse=True), ans[::-1])
        # nested and mixed contents
        self.assertEqual(
            sorted_robust([frozenset(['a', 1]), frozenset([1]), 0]),
            [0, frozenset([1]), frozenset(['a', 1])],
        )

    def test_set_elements(self):
        s = of(3, 'b', 1, 'a', (2, 1))
        self.assertEqual(sorted_robust(s), [1, 3, 'a', 'b', (2, 1)])
        self.assertEqual(str(s), "HashSet(1, 3, 'a', 'b', (2, 1))")


if __name__ == "__main__":
    unittest.main()
