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

# -*- coding: utf-8 -*-


__all__ = [
    'InvalidSeedConfiguration',
]


class InvalidSeedConfiguration(ValueError):
    """Raised when the initial mixer registers passed to ``seed`` are malformed.

    The ISAAC seeder starts its eight mixing registers (``a`` .. ``h``)
    either from a fixed golden-ratio octet or from values supplied by the
    caller.  A caller-supplied register list must contain exactly eight
    words; an empty list (or ``None``) selects the golden-ratio octet.
    Any other length raises this exception before the generator state is
    modified.

    Parameters
    ----------
    message : str
        A human-readable description including the offending length.

    See Also
    --------
    ISAACBase.seed : The method that validates the register list.

    Notes
    -----
    This is a subclass of :class:`ValueError`, so generic argument
    validation handlers also catch it.  It is the only error the seeder
    raises: seed memory of any length up to 256 words, including an
    all-zero or empty seed, is valid.

    Examples
    --------
    .. code-block:: python

        >>> import isaac
        >>> rng = isaac.ISAAC32RNG()
        >>> rng.seed([1, 2, 3], registers=[1, 2, 3])  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        isaac.InvalidSeedConfiguration: need exactly 8 initial register values, got 3
    """
    __module__ = 'isaac'
