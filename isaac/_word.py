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


"""
Word-width descriptors for the ISAAC generators.

An ISAAC instance works on unsigned words of a single, fixed width.  The
width determines the numpy dtype used for state and output arrays (all
arithmetic on them wraps modulo ``2**width``), the byte size used by the
indirection lookup, and the golden-ratio register octet the seeder starts
from.  :class:`WordSpec` bundles those facts so the rest of the package
resolves the width once, at construction time.
"""

from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np

__all__ = [
    'ISAAC_WORDS',
    'ISAAC_WORDS_LOG',
    'WordSpec',
    'WORD32',
    'WORD64',
    'get_word_spec',
]

ISAAC_WORDS_LOG = 8
ISAAC_WORDS = 1 << ISAAC_WORDS_LOG


class WordSpec(NamedTuple):
    """Static description of one ISAAC word width.

    Attributes
    ----------
    width : int
        Number of bits per word, ``32`` or ``64``.
    dtype : type
        The numpy scalar type holding one word.
    nbytes_log : int
        ``log2`` of the word size in bytes; the indirection step divides
        byte offsets by ``2**nbytes_log``.
    golden_ratio : int
        The golden-ratio constant the reference seeder fills every
        register with before mixing it four times.
    golden : tuple of int
        The eight registers obtained by mixing ``golden_ratio`` four times.
        The seeder starts from these values when the caller supplies none.
    """
    width: int
    dtype: type
    nbytes_log: int
    golden_ratio: int
    golden: Tuple[int, ...]

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def nbytes(self) -> int:
        return 1 << self.nbytes_log

    def asarray(self, values: Sequence[int], size: Optional[int] = None) -> np.ndarray:
        """Convert integers to a word array, reducing each modulo ``2**width``.

        Parameters
        ----------
        values : sequence of int
            Python ints or a numpy integer array.  Negative values wrap.
        size : int, optional
            When given, the result has exactly ``size`` elements: missing
            trailing positions are zero-filled.  ``values`` must not be
            longer than ``size``.

        Returns
        -------
        np.ndarray
            A new array of dtype :attr:`dtype`.
        """
        words = np.array([int(v) & self.mask for v in values], dtype=self.dtype)
        if size is None:
            return words
        out = np.zeros(size, dtype=self.dtype)
        out[:len(words)] = words
        return out


WORD32 = WordSpec(
    width=32,
    dtype=np.uint32,
    nbytes_log=2,
    golden_ratio=0x9e3779b9,
    golden=(
        0x1367df5a, 0x95d90059, 0xc3163e4b, 0x0f421ad8,
        0xd92a4a78, 0xa51a3c49, 0xc4efea1b, 0x30609119,
    ),
)

WORD64 = WordSpec(
    width=64,
    dtype=np.uint64,
    nbytes_log=3,
    golden_ratio=0x9e3779b97f4a7c13,
    golden=(
        0x647c4677a2884b7c, 0xb9f8b322c73ac862, 0x8c0ea5053d4712a0, 0xb29b2e824a595524,
        0x82f053db8355e0ce, 0x48fe4a0fa5a09315, 0xae985bf2cbfc89ed, 0x98f5704f6c44c0ab,
    ),
)

_WORD_SPECS = {
    32: WORD32,
    64: WORD64,
}


def get_word_spec(width: int) -> WordSpec:
    """Return the :class:`WordSpec` for ``width`` bits.

    Raises
    ------
    ValueError
        If ``width`` is neither 32 nor 64.
    """
    try:
        return _WORD_SPECS[width]
    except (KeyError, TypeError):
        raise ValueError(f'ISAAC word width must be 32 or 64, got {width!r}.') from None
