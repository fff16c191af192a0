import random
import unittest

from blocktui.scoreboard.highscore import HighScore
from blocktui.scoreboard.ranking import RankingCache


def scores_of(cache):
    return [hs.score for hs in cache.all()]


class TestRankingCache(unittest.TestCase):
    def test_empty_cache(self) -> None:
        cache = RankingCache(5)
        self.assertIsNone(cache.first())
        self.assertIsNone(cache.last())
        self.assertEqual(cache.all(), ())
        self.assertEqual(len(cache), 0)

    def test_scoreboard_add(self) -> None:
        cache = RankingCache(3)
        cache.add("Allison", 2)
        cache.add("Bob", 1)
        cache.add("Charlie", 3)
        cache.add("David", 4)

        self.assertEqual(len(cache.all()), 3)
        self.assertEqual(cache.first().score, 4)
        self.assertEqual(cache.first().name, "David")
        self.assertNotIn("Bob", [hs.name for hs in cache.all()])

        cache.add("Eddie", 10)
        self.assertEqual(len(cache.all()), 3)
        self.assertEqual(cache.first().score, 10)
        self.assertEqual(cache.first().name, "Eddie")

    def test_lower_score_rejected_when_full(self) -> None:
        cache = RankingCache(2)
        self.assertTrue(cache.add("a", 5))
        self.assertTrue(cache.add("b", 7))
        before = cache.all()

        self.assertFalse(cache.add("c", 4))
        self.assertEqual(cache.all(), before)
        self.assertEqual([hs.name for hs in cache.all()], ["b", "a"])

    def test_low_score_admitted_while_room_left(self) -> None:
        cache = RankingCache(3)
        cache.add("a", 5)
        self.assertTrue(cache.add("b", -10))
        self.assertEqual(scores_of(cache), [5, -10])

    def test_tie_with_worst_evicts_previous_worst(self) -> None:
        cache = RankingCache(2)
        cache.add("a", 5)
        cache.add("b", 3)

        self.assertTrue(cache.add("c", 3))
        self.assertEqual(len(cache), 2)
        self.assertEqual([hs.name for hs in cache.all()], ["a", "c"])

    def test_zero_capacity_never_retains(self) -> None:
        cache = RankingCache(0)
        self.assertFalse(cache.admits(100))
        self.assertFalse(cache.add("a", 100))
        self.assertEqual(cache.all(), ())

    def test_negative_capacity_rejected(self) -> None:
        with self.assertRaises(ValueError):
            RankingCache(-1)

    def test_random_adds_stay_sorted_and_bounded(self) -> None:
        rng = random.Random(1234)
        cache = RankingCache(5)
        for i in range(200):
            cache.add(f"p{i}", rng.randint(-50, 50))
            scores = scores_of(cache)
            self.assertLessEqual(len(scores), 5)
            self.assertEqual(scores, sorted(scores, reverse=True))

    def test_keeps_best_scores_seen(self) -> None:
        rng = random.Random(99)
        seen = [rng.randint(0, 1000) for _ in range(100)]
        cache = RankingCache(4)
        for i, score in enumerate(seen):
            cache.add(f"p{i}", score)
        self.assertEqual(scores_of(cache), sorted(seen, reverse=True)[:4])

    def test_init_sorts_descending(self) -> None:
        records = [HighScore.create(n, s) for n, s in (("a", 1), ("b", 9), ("c", 5))]
        cache = RankingCache.init(3, records)
        self.assertEqual(scores_of(cache), [9, 5, 1])

    def test_init_truncates_before_sorting(self) -> None:
        records = [HighScore.create(n, s) for n, s in (("a", 1), ("b", 2), ("c", 100))]
        cache = RankingCache.init(2, records)
        # the best entry sits past the cut and is not considered
        self.assertEqual(scores_of(cache), [2, 1])

    def test_insert_returns_evicted(self) -> None:
        cache = RankingCache(1)
        first = HighScore.create("a", 1).with_id(7)
        self.assertIsNone(cache.insert(first))

        evicted = cache.insert(HighScore.create("b", 2).with_id(8))
        self.assertEqual(evicted.id, 7)
        self.assertEqual(cache.first().id, 8)

    def test_insert_rejects_unadmitted_record(self) -> None:
        cache = RankingCache(1)
        cache.add("a", 10)
        with self.assertRaises(ValueError):
            cache.insert(HighScore.create("b", 1))
        self.assertEqual(scores_of(cache), [10])

    def test_all_is_read_only(self) -> None:
        cache = RankingCache(2)
        cache.add("a", 1)
        self.assertIsInstance(cache.all(), tuple)


if __name__ == "__main__":
    unittest.main()
