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


import abc
import warnings
from typing import Iterator, Optional, Sequence

import numpy as np

from ._config import get_default_width
from ._error import InvalidSeedConfiguration
from ._numba_isaac import (
    isaac32_refill,
    isaac32_seed,
    isaac64_refill,
    isaac64_seed,
)
from ._word import ISAAC_WORDS, WORD32, WORD64, WordSpec, get_word_spec

__all__ = [
    'ISAACBase',
    'ISAAC32RNG',
    'ISAAC64RNG',
    'get_isaac_rng_class',
    'ISAAC',
]


class ISAACBase(abc.ABC):
    """Abstract base class for ISAAC pseudorandom word generators.

    This class implements the width-independent skeleton of Bob Jenkins'
    ISAAC generator: validating and loading seed material, keeping the
    working memory and register state, and serving output words from the
    most recently generated block.  Concrete subclasses bind the skeleton
    to one word width by providing the :attr:`word` descriptor and the
    compiled seeding and refill kernels for that width.

    Parameters
    ----------
    memory : sequence of int, optional
        Up to 256 seed words copied into the working memory.  Missing
        positions are zero-filled.  ``None`` (the default) seeds with all
        zeros, which yields the reference stream.
    registers : sequence of int, optional
        Exactly eight starting values for the mixing registers.  ``None``
        or an empty sequence selects the golden-ratio octet.

    Raises
    ------
    InvalidSeedConfiguration
        If ``registers`` does not contain exactly 0 or 8 values.

    See Also
    --------
    ISAAC32RNG : 32-bit ISAAC.
    ISAAC64RNG : 64-bit ISAAC64.
    ISAAC : Factory selecting the class from a word width.

    Notes
    -----
    The state consists of

    - ``m``: 256 words of working memory,
    - ``r``: the 256 words of the most recent output block, consumed
      front-to-back through a read cursor,
    - ``a``, ``b``, ``c``: three registers; ``c`` counts refills.

    Every word of a block is delivered exactly once, whether through
    :meth:`next_word`, :meth:`random_raw`, iteration or :meth:`refill`.
    Output depends only on the seed and the sequence of calls; there is no
    hidden entropy.  Instances are not synchronized: share one between
    threads only under a lock, or give each thread its own generator.

    This is not a vetted cryptographic primitive.

    Examples
    --------
    .. code-block:: python

        >>> import isaac
        >>> rng = isaac.ISAAC32RNG()
        >>> word = rng.next_word()
        >>> block = rng.refill()
        >>> block.shape
        (256,)
    """

    word: WordSpec

    def __init__(
        self,
        memory: Optional[Sequence[int]] = None,
        registers: Optional[Sequence[int]] = None,
    ):
        dtype = self.word.dtype
        self._m = np.zeros(ISAAC_WORDS, dtype=dtype)
        self._r = np.zeros(ISAAC_WORDS, dtype=dtype)
        self._abc = np.zeros(3, dtype=dtype)
        self._cursor = ISAAC_WORDS
        self.seed(memory, registers)

    @abc.abstractmethod
    def _seed_kernel(self, m: np.ndarray, x: np.ndarray, abc_: np.ndarray):
        """Run the two seeding passes over ``m`` starting from registers ``x``."""

    @abc.abstractmethod
    def _refill_kernel(self, m: np.ndarray, r: np.ndarray, abc_: np.ndarray):
        """Advance ``m`` and ``abc_`` by one block, writing the output into ``r``."""

    @property
    def width(self) -> int:
        """Number of bits per generated word."""
        return self.word.width

    @property
    def buffered(self) -> int:
        """Number of words of the current output block not yet returned."""
        return ISAAC_WORDS - self._cursor

    def seed(
        self,
        memory: Optional[Sequence[int]] = None,
        registers: Optional[Sequence[int]] = None,
    ):
        """Reinitialize the generator from seed material.

        The working memory is loaded with ``memory`` (zero-filled to 256
        words), then mixed in two passes of eight-word groups so that every
        seed word affects every memory word.  The registers ``a``, ``b``
        and ``c`` are reset to zero and any buffered output is discarded,
        so the next word returned comes from the new seed.

        Parameters
        ----------
        memory : sequence of int, optional
            Up to 256 seed words.  Values are reduced modulo ``2**width``.
            Longer sequences are truncated to 256 words with a warning.
        registers : sequence of int, optional
            Exactly eight starting values for the mixing registers, or
            ``None`` / empty for the golden-ratio octet.

        Raises
        ------
        InvalidSeedConfiguration
            If ``registers`` has a length other than 0 or 8.  The generator
            is left unchanged in that case.
        """
        word = self.word
        registers = [] if registers is None else list(registers)
        if len(registers) not in (0, 8):
            raise InvalidSeedConfiguration(
                f'need exactly 8 initial register values, got {len(registers)}'
            )
        memory = [] if memory is None else list(memory)
        if len(memory) > ISAAC_WORDS:
            warnings.warn(
                f"isaac: seed memory has {len(memory)} words, only the first "
                f"{ISAAC_WORDS} are used.",
                UserWarning,
                stacklevel=2,
            )
            memory = memory[:ISAAC_WORDS]

        m = word.asarray(memory, size=ISAAC_WORDS)
        x = word.asarray(registers if registers else word.golden)
        self._seed_kernel(m, x, self._abc)
        self._m = m
        self._cursor = ISAAC_WORDS

    def _refill_buffer(self):
        self._refill_kernel(self._m, self._r, self._abc)
        self._cursor = 0

    def refill(self, out: Optional[np.ndarray] = None) -> np.ndarray:
        """Generate the next 256-word block and hand it to the caller.

        The block replaces the buffered output, and is considered consumed:
        the following :meth:`next_word` starts a new block.

        Parameters
        ----------
        out : np.ndarray, optional
            A ``(256,)`` array of the generator's word dtype receiving the
            block.  A new array is allocated when omitted.

        Returns
        -------
        np.ndarray
            The block, ``out`` if it was given.

        Raises
        ------
        ValueError
            If ``out`` has the wrong shape or dtype.  The state is not
            advanced in that case.
        """
        dtype = self.word.dtype
        if out is not None:
            if not isinstance(out, np.ndarray) or out.shape != (ISAAC_WORDS,) or out.dtype != dtype:
                raise ValueError(
                    f'out must be a ({ISAAC_WORDS},) array of dtype {np.dtype(dtype).name}.'
                )
        self._refill_buffer()
        self._cursor = ISAAC_WORDS
        if out is None:
            return self._r.copy()
        out[...] = self._r
        return out

    def next_word(self) -> int:
        """Return the next word of the stream as a Python ``int``."""
        if self._cursor >= ISAAC_WORDS:
            self._refill_buffer()
        value = self._r[self._cursor]
        self._cursor += 1
        return int(value)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next_word()

    def random_raw(self, size: int) -> np.ndarray:
        """Return the next ``size`` words of the stream as an array.

        Equivalent to ``size`` calls of :meth:`next_word`; words left over
        from the last block generated stay buffered.

        Parameters
        ----------
        size : int
            Number of words, non-negative.

        Returns
        -------
        np.ndarray
            A ``(size,)`` array of the generator's word dtype.
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 0:
            raise ValueError(f'size must be a non-negative integer, got {size!r}.')
        size = int(size)
        out = np.empty(size, dtype=self.word.dtype)
        filled = 0
        while filled < size:
            if self._cursor >= ISAAC_WORDS:
                self._refill_buffer()
            n = min(size - filled, ISAAC_WORDS - self._cursor)
            out[filled:filled + n] = self._r[self._cursor:self._cursor + n]
            self._cursor += n
            filled += n
        return out

    def rand(self) -> float:
        """Return a uniform random float in ``[0, 1)`` built from the next word.

        At most 53 high bits of the word are used, so the result is exact
        in double precision.
        """
        bits = min(self.word.width, 53)
        return (self.next_word() >> (self.word.width - bits)) * 2.0 ** -bits

    def __repr__(self):
        return f'{type(self).__name__}(buffered={self.buffered})'


class ISAAC32RNG(ISAACBase):
    """ISAAC generator producing 32-bit words.

    Uses the 32-bit ISAAC shift schedule (``<<13``, ``>>6``, ``<<2``,
    ``>>16``) and 32-bit mixing.  With an all-zero seed and default
    registers the stream reproduces Bob Jenkins' reference output; the
    vectors published in ``randvect.txt`` start at word 256 because the
    reference initializer consumes one block internally.

    Examples
    --------
    .. code-block:: python

        >>> rng = ISAAC32RNG()
        >>> hex(rng.random_raw(257)[256])
        '0xf650e4c8'
    """
    word = WORD32

    def _seed_kernel(self, m, x, abc_):
        isaac32_seed(m, x, abc_)

    def _refill_kernel(self, m, r, abc_):
        isaac32_refill(m, r, abc_)


class ISAAC64RNG(ISAACBase):
    """ISAAC64 generator producing 64-bit words.

    Uses the ISAAC64 shift schedule (``~(a ^ a<<21)``, ``a ^ a>>5``,
    ``a ^ a<<12``, ``a ^ a>>33``) and 64-bit mixing.  It is a separate
    algorithm from :class:`ISAAC32RNG`; the two streams are unrelated for
    any seed.
    """
    word = WORD64

    def _seed_kernel(self, m, x, abc_):
        isaac64_seed(m, x, abc_)

    def _refill_kernel(self, m, r, abc_):
        isaac64_refill(m, r, abc_)


_ISAAC_CLASSES = {
    32: ISAAC32RNG,
    64: ISAAC64RNG,
}


def get_isaac_rng_class(width: Optional[int] = None):
    """Return the generator class for ``width`` bits, or for the default width."""
    if width is None:
        width = get_default_width()
    return _ISAAC_CLASSES[get_word_spec(width).width]


def ISAAC(
    width: Optional[int] = None,
    memory: Optional[Sequence[int]] = None,
    registers: Optional[Sequence[int]] = None,
) -> ISAACBase:
    """Factory: create an ISAAC generator of the given word width.

    Parameters
    ----------
    width : int, optional
        ``32`` or ``64``.  Defaults to the thread's configured width
        (see :func:`set_default_width`).
    memory, registers :
        Seed material, as for :meth:`ISAACBase.seed`.

    Returns
    -------
    ISAACBase
        An instance of :class:`ISAAC32RNG` or :class:`ISAAC64RNG`.

    Raises
    ------
    ValueError
        If ``width`` is neither 32 nor 64.
    InvalidSeedConfiguration
        If ``registers`` does not contain exactly 0 or 8 values.
    """
    return get_isaac_rng_class(width)(memory, registers)
