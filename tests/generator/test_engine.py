"""Tests for the password generation engine and its entry points."""

from __future__ import annotations

import random
import threading
from collections import Counter
from unittest.mock import MagicMock, patch

import pytest

from passforge.config.settings import PolicySettings, RandomSettings
from passforge.core.charsets import (
    ALL_CHARS,
    CHARACTER_CLASSES,
    EXCLUDED_CHARS,
    NUMERIC_CHARS,
    SPECIAL_CHARS,
    classify,
)
from passforge.core.random_source import SecureRandomSource
from passforge.core.types import CharClass
from passforge.generator.config import GeneratorConfig
from passforge.generator.engine import (
    PasswordGenerator,
    generate,
    generate_password,
    generate_with_defaults,
    generate_with_length,
)


def _class_counts(password: str) -> Counter:
    return Counter(classify(c) for c in password)


_CONFIGS = [
    {},
    {"min_length": 8, "max_length": 8},
    {"min_length": 16, "max_length": 24, "min_special": 4},
    {"min_length": 4, "max_length": 6, "min_lower": 1, "min_upper": 1, "min_numeric": 1, "min_special": 1},
    {"min_length": 10, "max_length": 40, "min_lower": 0, "min_upper": 5, "min_numeric": 0, "min_special": 0},
    {"min_length": 3, "max_length": 9, "min_lower": 0, "min_upper": 0, "min_numeric": 0, "min_special": 0},
]


class TestGenerateProperties:
    @pytest.mark.parametrize("params", _CONFIGS)
    def test_length_within_bounds(self, params):
        gen = PasswordGenerator(**params)
        for _ in range(200):
            pw = gen.generate()
            assert gen.min_length <= len(pw) <= gen.max_length

    @pytest.mark.parametrize("params", _CONFIGS)
    def test_composition_minimums(self, params):
        gen = PasswordGenerator(**params)
        for _ in range(200):
            counts = _class_counts(gen.generate())
            assert counts[CharClass.LOWER] >= gen.min_lower
            assert counts[CharClass.UPPER] >= gen.min_upper
            assert counts[CharClass.NUMERIC] >= gen.min_numeric
            assert counts[CharClass.SPECIAL] >= gen.min_special

    @pytest.mark.parametrize("params", _CONFIGS)
    def test_never_emits_excluded_chars(self, params):
        gen = PasswordGenerator(**params)
        for _ in range(200):
            pw = gen.generate()
            assert not set(pw) & EXCLUDED_CHARS
            assert None not in _class_counts(pw)

    def test_every_length_is_reachable(self):
        gen = PasswordGenerator(min_length=8, max_length=11)
        lengths = {len(gen.generate()) for _ in range(400)}
        assert lengths == {8, 9, 10, 11}

    def test_filler_only_from_required_classes(self):
        gen = PasswordGenerator(
            min_length=30,
            max_length=30,
            min_lower=0,
            min_upper=0,
            min_numeric=2,
            min_special=2,
        )
        for _ in range(50):
            assert set(gen.generate()) <= set(NUMERIC_CHARS + SPECIAL_CHARS)

    def test_outputs_differ(self):
        gen = PasswordGenerator()
        passwords = {gen.generate() for _ in range(100)}
        assert len(passwords) == 100


class TestEdgeCases:
    def test_min_above_max_is_fixed_length(self):
        gen = PasswordGenerator(min_length=20, max_length=10)
        assert gen.max_length == 20
        for _ in range(50):
            assert len(gen.generate()) == 20

    def test_zero_minimums_single_char_from_union(self):
        gen = PasswordGenerator(
            min_length=1,
            max_length=1,
            min_lower=0,
            min_upper=0,
            min_numeric=0,
            min_special=0,
        )
        seen = set()
        for _ in range(2000):
            pw = gen.generate()
            assert len(pw) == 1
            assert pw in ALL_CHARS
            seen.add(classify(pw))
        assert seen == set(CharClass)

    def test_target_equal_to_required_minimum_has_no_filler(self):
        gen = PasswordGenerator(min_length=8, max_length=8)
        for _ in range(100):
            counts = _class_counts(gen.generate())
            assert counts == Counter({kind: 2 for kind in CharClass})


class TestShuffle:
    def test_guaranteed_chars_not_always_leading(self):
        # Guaranteed segment is lower,lower,upper,upper,... before shuffling
        gen = PasswordGenerator(min_length=8, max_length=8)
        first_classes = Counter(classify(gen.generate()[0]) for _ in range(400))
        assert len(first_classes) == 4
        assert first_classes[CharClass.LOWER] < 300

    def test_special_position_varies(self):
        gen = PasswordGenerator(
            min_length=12,
            max_length=12,
            min_lower=11,
            min_upper=0,
            min_numeric=0,
            min_special=1,
        )
        positions = Counter()
        for _ in range(300):
            pw = gen.generate()
            positions.update(i for i, c in enumerate(pw) if c in SPECIAL_CHARS)
        assert len(positions) == 12

    def test_shuffle_goes_through_secure_source(self):
        source = SecureRandomSource()
        gen = PasswordGenerator(min_length=10, max_length=10, random_source=source)
        with patch.object(source, "shuffle", wraps=source.shuffle) as spy:
            gen.generate()
        spy.assert_called_once()
        (buffer,), _ = spy.call_args
        assert len(buffer) == 10

    def test_does_not_use_stdlib_random(self):
        with (
            patch.object(random, "shuffle", side_effect=AssertionError("random.shuffle used")),
            patch.object(random, "choice", side_effect=AssertionError("random.choice used")),
            patch.object(random, "randint", side_effect=AssertionError("random.randint used")),
        ):
            assert len(generate_password(16)) == 16

    def test_unshuffled_order_with_identity_shuffle(self):
        source = SecureRandomSource()
        gen = PasswordGenerator(min_length=8, max_length=8, random_source=source)
        with patch.object(source, "shuffle"):
            pw = gen.generate()
        # Without a shuffle the guaranteed segment is class-grouped
        assert [classify(c) for c in pw] == [
            CharClass.LOWER,
            CharClass.LOWER,
            CharClass.UPPER,
            CharClass.UPPER,
            CharClass.NUMERIC,
            CharClass.NUMERIC,
            CharClass.SPECIAL,
            CharClass.SPECIAL,
        ]


class TestDrawSequence:
    def test_draws_use_exact_ranges(self):
        source = MagicMock(spec=SecureRandomSource)
        source.randint.return_value = 10
        source.choices.side_effect = lambda chars, k: [chars[0]] * k
        gen = PasswordGenerator(min_length=8, max_length=12, random_source=source)

        pw = gen.generate()

        source.randint.assert_called_once_with(8, 12)
        calls = [(c.args[0], c.args[1]) for c in source.choices.call_args_list]
        assert calls == [
            (CHARACTER_CLASSES[CharClass.LOWER].chars, 2),
            (CHARACTER_CLASSES[CharClass.UPPER].chars, 2),
            (CHARACTER_CLASSES[CharClass.NUMERIC].chars, 2),
            (CHARACTER_CLASSES[CharClass.SPECIAL].chars, 2),
            (ALL_CHARS, 2),
        ]
        source.shuffle.assert_called_once()
        assert len(pw) == 10


class TestGeneratorConstruction:
    def test_properties_mirror_config(self):
        cfg = GeneratorConfig(min_length=16, max_length=20, min_special=3)
        gen = PasswordGenerator(cfg)
        assert gen.config is cfg
        assert (gen.min_length, gen.max_length, gen.min_special) == (16, 20, 3)
        assert (gen.min_lower, gen.min_upper, gen.min_numeric) == (2, 2, 2)

    def test_config_and_params_are_exclusive(self):
        with pytest.raises(TypeError):
            PasswordGenerator(GeneratorConfig(), min_length=10)

    def test_invalid_params_propagate(self):
        from passforge.core.errors import InvalidParameter

        with pytest.raises(InvalidParameter):
            PasswordGenerator(min_length=5, min_special=0)

    def test_from_settings(self):
        policy = PolicySettings(
            min_length=14,
            max_length=14,
            min_lower=1,
            min_upper=1,
            min_numeric=1,
            min_special=1,
        )
        gen = PasswordGenerator.from_settings(
            policy,
            RandomSettings(max_retries=7, retry_delay_seconds=0.2),
        )
        assert gen.random_source.max_retries == 7
        assert gen.random_source.retry_delay_seconds == 0.2
        assert len(gen.generate()) == 14

    def test_repr_has_no_password_material(self):
        assert repr(PasswordGenerator()).startswith("PasswordGenerator(GeneratorConfig(")


class TestConvenienceEntryPoints:
    def test_generate_with_defaults(self):
        pw = generate_with_defaults()
        assert 12 <= len(pw) <= 24

    def test_generate_with_length(self):
        for _ in range(100):
            pw = generate_with_length(16)
            assert len(pw) == 16
            counts = _class_counts(pw)
            assert all(counts[kind] >= 2 for kind in CharClass)

    def test_generate_with_length_too_short(self):
        from passforge.core.errors import InvalidParameter

        with pytest.raises(InvalidParameter):
            generate_with_length(7)

    def test_generate_password_dispatch(self):
        assert len(generate_password(25)) == 25
        assert 12 <= len(generate_password()) <= 24

    def test_generate_function(self):
        cfg = GeneratorConfig(min_length=9, max_length=9)
        assert len(generate(cfg)) == 9


class TestConcurrency:
    def test_shared_generator_across_threads(self):
        gen = PasswordGenerator(min_length=16, max_length=16)
        results: list[str] = []
        lock = threading.Lock()

        def worker():
            local = [gen.generate() for _ in range(50)]
            with lock:
                results.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 400
        assert len(set(results)) == 400
        assert all(len(pw) == 16 for pw in results)
