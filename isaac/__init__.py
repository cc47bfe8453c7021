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


__version__ = "0.0.1"

from ._config import set_default_width, get_default_width, isaac_environ_context
from ._error import InvalidSeedConfiguration
from ._rng import ISAACBase, ISAAC32RNG, ISAAC64RNG, ISAAC, get_isaac_rng_class
from ._word import ISAAC_WORDS, WordSpec, get_word_spec

__all__ = [

    # --- generators --- #
    'ISAAC',
    'ISAACBase',
    'ISAAC32RNG',
    'ISAAC64RNG',
    'get_isaac_rng_class',

    # --- word widths --- #
    'ISAAC_WORDS',
    'WordSpec',
    'get_word_spec',

    # --- configuration --- #
    'set_default_width',
    'get_default_width',
    'isaac_environ_context',

    # --- errors --- #
    'InvalidSeedConfiguration',

]
