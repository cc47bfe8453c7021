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
Numba-compiled ISAAC kernels.

This module provides standalone ``@numba.njit`` functions implementing the
three stages of Bob Jenkins' ISAAC generator for both word widths:

* **mix** -- the 8-register avalanche permutation used while seeding.
* **seed** -- two mixing passes that spread the seed memory over the
  whole working memory.
* **refill** -- the block permutation producing 256 output words.

State is represented as numpy arrays and mutated in-place:

* ``m`` -- working memory, ``(256,)`` array of ``uint32`` or ``uint64``.
* ``r`` -- output block, same shape and dtype as ``m``.
* ``abc`` -- the ``(3,)`` register array ``[a, b, c]``.
* ``x`` -- the ``(8,)`` mixing registers ``[a, b, c, d, e, f, g, h]``.

Word arithmetic wraps modulo ``2**width`` because every intermediate
value is stored back into an array of the word dtype, or explicitly cast
with ``np.uint32`` / ``np.uint64``.  The 32-bit and 64-bit families are
written out separately so each one compiles to its own specialised
kernel, and callers pick a family once through :func:`get_numba_isaac_funcs`.
"""

import numba
import numpy as np

from ._word import ISAAC_WORDS, ISAAC_WORDS_LOG, get_word_spec

__all__ = [
    # ISAAC-32
    'isaac32_mix',
    'isaac32_ind',
    'isaac32_seed',
    'isaac32_refill',
    # ISAAC-64
    'isaac64_mix',
    'isaac64_ind',
    'isaac64_seed',
    'isaac64_refill',
    # Dispatch helpers
    'get_numba_isaac_mix',
    'get_numba_isaac_seed',
    'get_numba_isaac_refill',
    'get_numba_isaac_funcs',
    'mixed_golden_ratio',
]

_HALF = ISAAC_WORDS // 2

# byte-offset masks of the indirection step: (ISAAC_WORDS - 1) << log2(nbytes)
_IND_MASK32 = np.uint32((ISAAC_WORDS - 1) << 2)
_IND_MASK64 = np.uint64((ISAAC_WORDS - 1) << 3)


# ──────────────────────────────────────────────────────────────────────
#  ISAAC-32
# ──────────────────────────────────────────────────────────────────────

@numba.njit(inline='always')
def isaac32_mix(x):
    """Apply the 32-bit avalanche permutation in-place to ``x[0:8]``.

    Parameters
    ----------
    x : np.ndarray
        A ``(8,)`` ``uint32`` array holding the registers ``a`` .. ``h``.
    """
    x[0] ^= x[1] << np.uint32(11)
    x[3] += x[0]
    x[1] += x[2]
    x[1] ^= x[2] >> np.uint32(2)
    x[4] += x[1]
    x[2] += x[3]
    x[2] ^= x[3] << np.uint32(8)
    x[5] += x[2]
    x[3] += x[4]
    x[3] ^= x[4] >> np.uint32(16)
    x[6] += x[3]
    x[4] += x[5]
    x[4] ^= x[5] << np.uint32(10)
    x[7] += x[4]
    x[5] += x[6]
    x[5] ^= x[6] >> np.uint32(4)
    x[0] += x[5]
    x[6] += x[7]
    x[6] ^= x[7] << np.uint32(8)
    x[1] += x[6]
    x[7] += x[0]
    x[7] ^= x[0] >> np.uint32(9)
    x[2] += x[7]
    x[0] += x[1]


@numba.njit(inline='always')
def isaac32_ind(m, v):
    """Look up the word of ``m`` selected by bits 2..9 of ``v``."""
    return m[np.intp((v & _IND_MASK32) >> np.uint32(2))]


@numba.njit(nogil=True)
def isaac32_seed(m, x, abc):
    """Mix the seed held in ``m`` into the full 32-bit working memory.

    Parameters
    ----------
    m : np.ndarray
        ``(256,)`` ``uint32`` array holding the seed words on entry and the
        mixed working memory on return.
    x : np.ndarray
        ``(8,)`` ``uint32`` starting registers; overwritten.
    abc : np.ndarray
        ``(3,)`` ``uint32`` register array, reset to zero.
    """
    for _ in range(2):
        for i in range(0, ISAAC_WORDS, 8):
            for k in range(8):
                x[k] += m[i + k]
            isaac32_mix(x)
            for k in range(8):
                m[i + k] = x[k]
    abc[0] = 0
    abc[1] = 0
    abc[2] = 0


@numba.njit(inline='always')
def _isaac32_step(m, r, i, a, b):
    a = np.uint32(a + m[(i + _HALF) % ISAAC_WORDS])
    x = m[i]
    y = np.uint32(isaac32_ind(m, x) + a + b)
    m[i] = y
    b = np.uint32(isaac32_ind(m, y >> np.uint32(ISAAC_WORDS_LOG)) + x)
    r[i] = b
    return a, b


@numba.njit(nogil=True)
def isaac32_refill(m, r, abc):
    """Advance the 32-bit state and write the next 256 words into ``r``.

    Parameters
    ----------
    m : np.ndarray
        ``(256,)`` ``uint32`` working memory, updated in-place.
    r : np.ndarray
        ``(256,)`` ``uint32`` output block, overwritten.
    abc : np.ndarray
        ``(3,)`` ``uint32`` register array ``[a, b, c]``, updated in-place.
    """
    c = np.uint32(abc[2] + np.uint32(1))
    a = abc[0]
    b = np.uint32(abc[1] + c)
    # positions i < 128 pair with i + 128, the second half with i - 128
    for i in range(0, ISAAC_WORDS, 4):
        a = np.uint32(a ^ (a << np.uint32(13)))
        a, b = _isaac32_step(m, r, i, a, b)
        a = np.uint32(a ^ (a >> np.uint32(6)))
        a, b = _isaac32_step(m, r, i + 1, a, b)
        a = np.uint32(a ^ (a << np.uint32(2)))
        a, b = _isaac32_step(m, r, i + 2, a, b)
        a = np.uint32(a ^ (a >> np.uint32(16)))
        a, b = _isaac32_step(m, r, i + 3, a, b)
    abc[0] = a
    abc[1] = b
    abc[2] = c


# ──────────────────────────────────────────────────────────────────────
#  ISAAC-64
# ──────────────────────────────────────────────────────────────────────

@numba.njit(inline='always')
def isaac64_mix(x):
    """Apply the 64-bit avalanche permutation in-place to ``x[0:8]``.

    Parameters
    ----------
    x : np.ndarray
        A ``(8,)`` ``uint64`` array holding the registers ``a`` .. ``h``.
    """
    x[0] -= x[4]
    x[5] ^= x[7] >> np.uint64(9)
    x[7] += x[0]
    x[1] -= x[5]
    x[6] ^= x[0] << np.uint64(9)
    x[0] += x[1]
    x[2] -= x[6]
    x[7] ^= x[1] >> np.uint64(23)
    x[1] += x[2]
    x[3] -= x[7]
    x[0] ^= x[2] << np.uint64(15)
    x[2] += x[3]
    x[4] -= x[0]
    x[1] ^= x[3] >> np.uint64(14)
    x[3] += x[4]
    x[5] -= x[1]
    x[2] ^= x[4] << np.uint64(20)
    x[4] += x[5]
    x[6] -= x[2]
    x[3] ^= x[5] >> np.uint64(17)
    x[5] += x[6]
    x[7] -= x[3]
    x[4] ^= x[6] << np.uint64(14)
    x[6] += x[7]


@numba.njit(inline='always')
def isaac64_ind(m, v):
    """Look up the word of ``m`` selected by bits 3..10 of ``v``."""
    return m[np.intp((v & _IND_MASK64) >> np.uint64(3))]


@numba.njit(nogil=True)
def isaac64_seed(m, x, abc):
    """Mix the seed held in ``m`` into the full 64-bit working memory.

    Same contract as :func:`isaac32_seed` with ``uint64`` arrays.
    """
    for _ in range(2):
        for i in range(0, ISAAC_WORDS, 8):
            for k in range(8):
                x[k] += m[i + k]
            isaac64_mix(x)
            for k in range(8):
                m[i + k] = x[k]
    abc[0] = 0
    abc[1] = 0
    abc[2] = 0


@numba.njit(inline='always')
def _isaac64_step(m, r, i, a, b):
    a = np.uint64(a + m[(i + _HALF) % ISAAC_WORDS])
    x = m[i]
    y = np.uint64(isaac64_ind(m, x) + a + b)
    m[i] = y
    b = np.uint64(isaac64_ind(m, y >> np.uint64(ISAAC_WORDS_LOG)) + x)
    r[i] = b
    return a, b


@numba.njit(nogil=True)
def isaac64_refill(m, r, abc):
    """Advance the 64-bit state and write the next 256 words into ``r``.

    Same contract as :func:`isaac32_refill` with ``uint64`` arrays.
    """
    c = np.uint64(abc[2] + np.uint64(1))
    a = abc[0]
    b = np.uint64(abc[1] + c)
    for i in range(0, ISAAC_WORDS, 4):
        a = np.uint64(~(a ^ (a << np.uint64(21))))
        a, b = _isaac64_step(m, r, i, a, b)
        a = np.uint64(a ^ (a >> np.uint64(5)))
        a, b = _isaac64_step(m, r, i + 1, a, b)
        a = np.uint64(a ^ (a << np.uint64(12)))
        a, b = _isaac64_step(m, r, i + 2, a, b)
        a = np.uint64(a ^ (a >> np.uint64(33)))
        a, b = _isaac64_step(m, r, i + 3, a, b)
    abc[0] = a
    abc[1] = b
    abc[2] = c


# ──────────────────────────────────────────────────────────────────────
#  Dispatch tables and helpers
# ──────────────────────────────────────────────────────────────────────

_NUMBA_ISAAC_MIX = {
    32: isaac32_mix,
    64: isaac64_mix,
}

_NUMBA_ISAAC_SEED = {
    32: isaac32_seed,
    64: isaac64_seed,
}

_NUMBA_ISAAC_REFILL = {
    32: isaac32_refill,
    64: isaac64_refill,
}


def get_numba_isaac_mix(width):
    """Return the Numba mixing function for ``width``-bit words."""
    return _NUMBA_ISAAC_MIX[get_word_spec(width).width]


def get_numba_isaac_seed(width):
    """Return the Numba seeding function for ``width``-bit words."""
    return _NUMBA_ISAAC_SEED[get_word_spec(width).width]


def get_numba_isaac_refill(width):
    """Return the Numba refill function for ``width``-bit words."""
    return _NUMBA_ISAAC_REFILL[get_word_spec(width).width]


def get_numba_isaac_funcs(width):
    """Return a dict of all Numba ISAAC functions for ``width``-bit words.

    Returns
    -------
    dict
        Keys: ``'mix'``, ``'seed'``, ``'refill'``.

    Raises
    ------
    ValueError
        If ``width`` is neither 32 nor 64.
    """
    width = get_word_spec(width).width
    return {
        'mix': _NUMBA_ISAAC_MIX[width],
        'seed': _NUMBA_ISAAC_SEED[width],
        'refill': _NUMBA_ISAAC_REFILL[width],
    }


def mixed_golden_ratio(width):
    """Derive the seeder's default registers by mixing the golden ratio four times.

    The reference seeder fills all eight registers with the golden ratio
    and applies the mixer four times before touching the seed.  The
    result is a constant, stored in :attr:`WordSpec.golden`; this function
    recomputes it from scratch.

    Returns
    -------
    tuple of int
        The eight mixed registers ``a`` .. ``h``.
    """
    spec = get_word_spec(width)
    x = np.full(8, spec.golden_ratio, dtype=spec.dtype)
    mix = _NUMBA_ISAAC_MIX[spec.width]
    for _ in range(4):
        mix(x)
    return tuple(int(v) for v in x)
