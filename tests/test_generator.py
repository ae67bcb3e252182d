import random
import unittest

from wordsearch.core.constants import ALL_DIRECTIONS, Direction
from wordsearch.core.exceptions import ConfigurationError, InvalidGridSizeError
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator, generate
from wordsearch.engine.validator import GridValidator


class FirstChoiceRandom(random.Random):
    """Always picks the first option and counts direction draws."""

    def __init__(self) -> None:
        super().__init__(0)
        self.direction_draws = 0

    def choice(self, seq):
        if isinstance(seq, tuple) and seq and isinstance(seq[0], Direction):
            self.direction_draws += 1
        return seq[0]


class GeneratorScenarioTests(unittest.TestCase):
    def assertStructurallyValid(self, result) -> None:
        validation = GridValidator().validate(result)
        self.assertTrue(validation.ok, validation.messages)

    def test_cat_and_dog_in_five_by_five(self) -> None:
        for seed in range(25):
            result = WordSearchGenerator(GeneratorConfig(size=5, seed=seed)).generate(["CAT", "DOG"])
            self.assertEqual(len(result.grid), 5)
            for row in result.grid:
                self.assertEqual(len(row), 5)
                for letter in row:
                    self.assertTrue(letter.isalpha() and letter.isupper())
            self.assertEqual(sorted(result.placed_words), ["CAT", "DOG"])
            for placement in result.placed:
                self.assertEqual(result.read(placement), placement.word)
            self.assertStructurallyValid(result)

    def test_word_longer_than_grid_is_not_placed(self) -> None:
        result = generate(["ABCDEFGHIJKLMNOPQRST"], size=10, rng=random.Random(3))
        self.assertEqual(result.placed, ())
        self.assertEqual(result.unplaced_words, ["ABCDEFGHIJKLMNOPQRST"])
        self.assertFalse(result.all_placed)
        self.assertEqual(len(result.grid), 10)
        self.assertTrue(all(len(letter) == 1 for row in result.grid for letter in row))
        self.assertStructurallyValid(result)

    def test_crossing_words_agree_on_shared_cells(self) -> None:
        overlaps_seen = 0
        for seed in range(200):
            result = generate(["CAT", "TAP"], size=4, rng=random.Random(seed))
            self.assertEqual(len(result.placed), 2)
            cat, tap = result.placement_for("CAT"), result.placement_for("TAP")
            shared = set(cat.path) & set(tap.path)
            for r, c in shared:
                self.assertEqual(
                    cat.word[cat.path.index((r, c))],
                    tap.word[tap.path.index((r, c))],
                )
            overlaps_seen += bool(shared)
            self.assertStructurallyValid(result)
        self.assertGreater(overlaps_seen, 0)

    def test_repeated_runs_stay_structurally_valid(self) -> None:
        words = ["ELEPHANT", "GIRAFFE", "ZEBRA", "LION", "TIGER", "HIPPO", "RHINO", "OTTER"]
        generator = WordSearchGenerator(GeneratorConfig(size=12))
        for _ in range(30):
            result = generator.generate(words)
            self.assertLessEqual(len(result.placed), len(words))
            self.assertTrue(set(result.placed_words) <= set(words))
            self.assertStructurallyValid(result)

    def test_placements_are_longest_first(self) -> None:
        words = ["OX", "HORSE", "CAT", "GOOSE", "DONKEY"]
        result = generate(words, size=15, rng=random.Random(11))
        self.assertEqual(result.placed_words, ["DONKEY", "HORSE", "GOOSE", "CAT", "OX"])
        self.assertEqual(result.words, tuple(words))

    def test_single_letter_word_is_placed(self) -> None:
        result = generate(["Q"], size=1, rng=random.Random(0))
        self.assertEqual(result.grid, (("Q",),))
        self.assertEqual(result.placed[0].path, [(0, 0)])

    def test_empty_word_is_skipped(self) -> None:
        result = generate(["", "SUN"], size=5, rng=random.Random(0))
        self.assertEqual(result.placed_words, ["SUN"])
        self.assertEqual(result.unplaced_words, [""])

    def test_duplicates_are_not_removed(self) -> None:
        result = generate(["SKY", "SKY"], size=6, rng=random.Random(2))
        self.assertEqual(result.placed_words, ["SKY", "SKY"])
        self.assertStructurallyValid(result)

    def test_restricted_directions(self) -> None:
        config = GeneratorConfig(size=8, seed=5, directions=(Direction.RIGHT, Direction.DOWN))
        result = WordSearchGenerator(config).generate(["APPLE", "PEAR", "PLUM", "FIG"])
        for placement in result.placed:
            self.assertIn(placement.direction, (Direction.RIGHT, Direction.DOWN))

    def test_directions_accept_any_iterable(self) -> None:
        config = GeneratorConfig(size=6, seed=8, directions={Direction.UP})
        result = WordSearchGenerator(config).generate(["CAT", "DOG"])
        self.assertEqual(config.directions, (Direction.UP,))
        self.assertEqual(result.placed_words, ["CAT", "DOG"])
        for placement in result.placed:
            self.assertEqual(placement.direction, Direction.UP)


class GeneratorDeterminismTests(unittest.TestCase):
    def test_same_seed_reproduces_result(self) -> None:
        words = ["PYTHON", "RANDOM", "GRID", "SEARCH", "PUZZLE"]
        first = WordSearchGenerator(GeneratorConfig(size=10, seed=1234)).generate(words)
        second = WordSearchGenerator(GeneratorConfig(size=10, seed=1234)).generate(words)
        self.assertEqual(first.grid, second.grid)
        self.assertEqual(first.to_jsonable(), second.to_jsonable())

    def test_injected_random_source_reproduces_result(self) -> None:
        words = ["ALPHA", "BETA", "GAMMA"]
        first = generate(words, size=7, rng=random.Random(99))
        second = generate(words, size=7, rng=random.Random(99))
        self.assertEqual(first.to_jsonable(), second.to_jsonable())

    def test_fixed_choices_exhaust_attempt_budget(self) -> None:
        rng = FirstChoiceRandom()
        config = GeneratorConfig(size=5, attempt_budget=7)
        result = WordSearchGenerator(config, rng=rng).generate(["CAT", "DOG"])

        self.assertEqual(result.placed_words, ["CAT"])
        self.assertEqual(result.placed[0].direction, ALL_DIRECTIONS[0])
        self.assertEqual(result.placed[0].start, (0, 0))
        self.assertEqual(result.unplaced_words, ["DOG"])
        self.assertEqual(rng.direction_draws, 1 + 7)
        self.assertEqual(["".join(row) for row in result.grid], ["CATAA"] + ["AAAAA"] * 4)


class GeneratorConfigTests(unittest.TestCase):
    def test_invalid_size_fails_fast(self) -> None:
        generator = WordSearchGenerator()
        for size in (0, -1):
            with self.assertRaises(InvalidGridSizeError):
                generator.generate(["CAT"], size=size)
        with self.assertRaises(ValueError):
            generate(["CAT"], size=0)
        with self.assertRaises(InvalidGridSizeError):
            WordSearchGenerator(GeneratorConfig(size=0))

    def test_invalid_budget_and_alphabet(self) -> None:
        with self.assertRaises(ConfigurationError):
            WordSearchGenerator(GeneratorConfig(attempt_budget=0))
        with self.assertRaises(ConfigurationError):
            WordSearchGenerator(GeneratorConfig(alphabet=""))
        with self.assertRaises(ConfigurationError):
            WordSearchGenerator(GeneratorConfig(directions=()))

    def test_default_size_is_fifteen(self) -> None:
        result = WordSearchGenerator(GeneratorConfig(seed=0)).generate(["HELLO"])
        self.assertEqual(result.size, 15)
        self.assertEqual(result.seed, 0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
