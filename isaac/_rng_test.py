# Copyright 2025 BrainX Ecosystem Limited. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================


import itertools
import warnings

import numpy as np
import pytest

import isaac
from isaac import ISAAC, ISAAC32RNG, ISAAC64RNG, ISAAC_WORDS, InvalidSeedConfiguration
from isaac._word import WORD32, WORD64

RNG_CLASSES = [ISAAC32RNG, ISAAC64RNG]


class TestReferenceStream:
    """Test the 32-bit stream against Bob Jenkins' published vectors."""

    def test_randvect(self):
        words = ISAAC32RNG().random_raw(2 * ISAAC_WORDS)
        assert [int(v) for v in words[ISAAC_WORDS:ISAAC_WORDS + 4]] == [
            0xf650e4c8, 0xe448e96d, 0x98db2fb4, 0xf5fad54f,
        ]

    def test_randvect64(self):
        words = ISAAC64RNG().random_raw(2 * ISAAC_WORDS)
        assert [int(v) for v in words[:2]] == [0x48cbff086ddf285a, 0x99e7afeabe000731]
        assert [int(v) for v in words[ISAAC_WORDS:ISAAC_WORDS + 2]] == [
            0x12a8f216af9418c2, 0xd4490ad526f14431,
        ]

    def test_explicit_golden_registers(self):
        for cls in RNG_CLASSES:
            default = cls().random_raw(16)
            explicit = cls(registers=cls.word.golden).random_raw(16)
            np.testing.assert_array_equal(default, explicit)


@pytest.mark.parametrize('cls', RNG_CLASSES)
class TestDeterminism:
    def test_same_seed_same_stream(self, cls):
        seed = [7, 11, 13, 17]
        rng1 = cls(seed)
        rng2 = cls(seed)
        for _ in range(600):
            assert rng1.next_word() == rng2.next_word()

    def test_different_seed_different_stream(self, cls):
        assert not np.array_equal(cls([1]).random_raw(32), cls([2]).random_raw(32))

    def test_different_registers_different_stream(self, cls):
        a = cls(registers=range(8)).random_raw(32)
        b = cls(registers=range(1, 9)).random_raw(32)
        assert not np.array_equal(a, b)

    def test_short_seed_is_zero_filled(self, cls):
        np.testing.assert_array_equal(
            cls([5]).random_raw(64),
            cls([5] + [0] * (ISAAC_WORDS - 1)).random_raw(64),
        )
        np.testing.assert_array_equal(
            cls().random_raw(64),
            cls([0] * ISAAC_WORDS).random_raw(64),
        )

    def test_seed_values_wrap(self, cls):
        width = cls.word.width
        np.testing.assert_array_equal(
            cls([2 ** width + 9, -1]).random_raw(16),
            cls([9, 2 ** width - 1]).random_raw(16),
        )

    def test_numpy_seed(self, cls):
        seed = np.arange(ISAAC_WORDS, dtype=cls.word.dtype)
        np.testing.assert_array_equal(
            cls(seed).random_raw(16),
            cls(list(range(ISAAC_WORDS))).random_raw(16),
        )


@pytest.mark.parametrize('cls', RNG_CLASSES)
class TestBlocks:
    def test_block_divergence(self, cls):
        words = cls().random_raw(2 * ISAAC_WORDS)
        assert not np.array_equal(words[:ISAAC_WORDS], words[ISAAC_WORDS:])

    def test_refill_returns_block(self, cls):
        rng1 = cls([42])
        rng2 = cls([42])
        block = rng1.refill()
        assert block.shape == (ISAAC_WORDS,)
        assert block.dtype == cls.word.dtype
        np.testing.assert_array_equal(block, rng2.random_raw(ISAAC_WORDS))

    def test_refill_consumes_block(self, cls):
        rng1 = cls([42])
        rng2 = cls([42])
        rng1.refill()
        assert rng1.buffered == 0
        expected = rng2.random_raw(ISAAC_WORDS + 1)[-1]
        assert rng1.next_word() == expected

    def test_refill_discards_partial_block(self, cls):
        rng1 = cls([42])
        rng2 = cls([42])
        rng1.next_word()
        second = rng1.refill()
        np.testing.assert_array_equal(second, rng2.random_raw(2 * ISAAC_WORDS)[ISAAC_WORDS:])

    def test_refill_out(self, cls):
        rng1 = cls([1, 2])
        rng2 = cls([1, 2])
        out = np.zeros(ISAAC_WORDS, dtype=cls.word.dtype)
        result = rng1.refill(out=out)
        assert result is out
        np.testing.assert_array_equal(out, rng2.refill())

    def test_refill_bad_out_does_not_advance(self, cls):
        rng1 = cls([1, 2])
        rng2 = cls([1, 2])
        other = np.uint64 if cls.word.dtype == np.uint32 else np.uint32
        with pytest.raises(ValueError):
            rng1.refill(out=np.zeros(ISAAC_WORDS, dtype=other))
        with pytest.raises(ValueError):
            rng1.refill(out=np.zeros(ISAAC_WORDS - 1, dtype=cls.word.dtype))
        with pytest.raises(ValueError):
            rng1.refill(out=[0] * ISAAC_WORDS)
        np.testing.assert_array_equal(rng1.refill(), rng2.refill())

    def test_buffered(self, cls):
        rng = cls()
        assert rng.buffered == 0
        rng.next_word()
        assert rng.buffered == ISAAC_WORDS - 1
        rng.random_raw(ISAAC_WORDS - 1)
        assert rng.buffered == 0
        rng.next_word()
        assert rng.buffered == ISAAC_WORDS - 1


@pytest.mark.parametrize('cls', RNG_CLASSES)
class TestReseed:
    def test_reseed_discards_buffer(self, cls):
        rng = cls([1])
        for _ in range(10):
            rng.next_word()
        rng.seed([2])
        assert rng.buffered == 0
        np.testing.assert_array_equal(rng.random_raw(300), cls([2]).random_raw(300))

    def test_reseed_resets_counter(self, cls):
        rng = cls([3])
        rng.random_raw(5 * ISAAC_WORDS)
        rng.seed([3])
        np.testing.assert_array_equal(rng.random_raw(ISAAC_WORDS), cls([3]).random_raw(ISAAC_WORDS))

    def test_overlong_seed_warns_and_truncates(self, cls):
        seed = list(range(ISAAC_WORDS + 10))
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            rng = cls(seed)
            assert any('only the first' in str(warning.message) for warning in w)
        np.testing.assert_array_equal(rng.random_raw(16), cls(seed[:ISAAC_WORDS]).random_raw(16))


@pytest.mark.parametrize('cls', RNG_CLASSES)
class TestRegisterValidation:
    @pytest.mark.parametrize('n', [1, 3, 7, 9])
    def test_bad_length(self, cls, n):
        with pytest.raises(InvalidSeedConfiguration):
            cls(registers=list(range(n)))

    def test_is_value_error(self, cls):
        with pytest.raises(ValueError):
            cls(registers=[1, 2, 3])

    @pytest.mark.parametrize('registers', [None, [], list(range(8))])
    def test_accepted(self, cls, registers):
        cls(registers=registers).next_word()

    def test_failed_seed_leaves_state(self, cls):
        rng1 = cls([9])
        rng2 = cls([9])
        first = rng1.next_word()
        with pytest.raises(InvalidSeedConfiguration):
            rng1.seed([10], registers=[1, 2, 3])
        assert first == rng2.next_word()
        np.testing.assert_array_equal(rng1.random_raw(300), rng2.random_raw(300))


@pytest.mark.parametrize('cls', RNG_CLASSES)
class TestExtraction:
    def test_word_range(self, cls):
        rng = cls([123])
        for _ in range(300):
            v = rng.next_word()
            assert isinstance(v, int)
            assert 0 <= v < 2 ** cls.word.width

    def test_random_raw_matches_next_word(self, cls):
        rng1 = cls([5, 5])
        rng2 = cls([5, 5])
        rng1.next_word()
        rng2.next_word()
        words = rng1.random_raw(700)
        assert words.dtype == cls.word.dtype
        assert words.tolist() == [rng2.next_word() for _ in range(700)]

    def test_random_raw_zero(self, cls):
        rng = cls()
        assert rng.random_raw(0).shape == (0,)
        assert rng.buffered == 0

    @pytest.mark.parametrize('size', [-1, 1.5, '3', True])
    def test_random_raw_bad_size(self, cls, size):
        with pytest.raises(ValueError):
            cls().random_raw(size)

    def test_iteration(self, cls):
        rng1 = cls([8])
        rng2 = cls([8])
        assert list(itertools.islice(rng1, 20)) == rng2.random_raw(20).tolist()

    def test_rand(self, cls):
        rng = cls([77])
        samples = np.array([rng.rand() for _ in range(5000)])
        assert np.all(samples >= 0.0)
        assert np.all(samples < 1.0)
        assert 0.45 <= samples.mean() <= 0.55

    def test_repr(self, cls):
        assert repr(cls()) == f'{cls.__name__}(buffered=0)'


class TestWidths:
    def test_width_property(self):
        assert ISAAC32RNG().width == 32
        assert ISAAC64RNG().width == 64

    def test_factory(self):
        assert isinstance(ISAAC(32), ISAAC32RNG)
        assert isinstance(ISAAC(64, memory=[1], registers=range(8)), ISAAC64RNG)
        assert isaac.get_isaac_rng_class(64) is ISAAC64RNG

    @pytest.mark.parametrize('width', [16, 128, 'big'])
    def test_factory_bad_width(self, width):
        with pytest.raises(ValueError):
            ISAAC(width)

    def test_isaac64_uses_full_width(self):
        words = ISAAC64RNG().random_raw(ISAAC_WORDS)
        assert words.dtype == np.uint64
        assert np.any(words > np.uint64(0xFFFFFFFF))

    def test_word_specs(self):
        assert ISAAC32RNG.word is WORD32
        assert ISAAC64RNG.word is WORD64

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            isaac.ISAACBase()
