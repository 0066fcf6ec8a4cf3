import itertools
import unittest

from strops import functional


class FunctionalTest(unittest.TestCase):
    def test_drop_until(self) -> None:
        self.assertEqual([3, 1], list(functional.drop_until(lambda x: x >= 3, [1, 2, 3, 1])))
        self.assertEqual([], list(functional.drop_until(lambda x: x > 10, [1, 2, 3])))

    def test_drop_while(self) -> None:
        data = [1, 2, 3, 1]
        self.assertEqual(list(itertools.dropwhile(lambda x: x < 3, data)),
                         list(functional.drop_while(lambda x: x < 3, data)))
        self.assertEqual(list("1cd2"), list(functional.drop_while(str.isalpha, "ab1cd2")))
        self.assertEqual([], list(functional.drop_while(lambda _: True, data)))

    def test_take_while(self) -> None:
        data = [1, 2, 3, 1]
        self.assertEqual([1, 2], list(functional.take_while(lambda x: x < 3, data)))
        # Items after the first failure must not be consumed.
        iterator = iter(data)
        self.assertEqual([1], list(functional.take_while(lambda x: x < 2, iterator)))
        self.assertEqual([3, 1], list(iterator))

    def test_laziness(self) -> None:
        naturals = itertools.count()
        result = functional.drop_while(lambda x: x < 5, naturals)
        self.assertEqual([5, 6, 7], list(itertools.islice(result, 3)))

    def test_predicate_not_evaluated_after_failure(self) -> None:
        seen = []

        def pred_fn(x: int) -> bool:
            seen.append(x)
            return x < 3

        self.assertEqual([3, 1, 0], list(functional.drop_while(pred_fn, [1, 2, 3, 1, 0])))
        self.assertEqual([1, 2, 3], seen)
