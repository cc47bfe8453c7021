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


import threading
from contextlib import contextmanager
from typing import Optional

from ._word import get_word_spec

__all__ = [
    'isaac_environ',
    'isaac_environ_context',
    'set_default_width',
    'get_default_width',
]


class IsaacEnvironment(threading.local):
    def __init__(self, *args, **kwargs):
        # default environment settings
        super().__init__(*args, **kwargs)
        self.width: int = 32


isaac_environ = IsaacEnvironment()


def set_default_width(width: int):
    """
    Set the word width used by generators created without an explicit width.

    The setting is thread-local.
    """
    isaac_environ.width = get_word_spec(width).width


def get_default_width() -> int:
    """
    Return the word width used by generators created without an explicit width.
    """
    return isaac_environ.width


@contextmanager
def isaac_environ_context(width: Optional[int] = None):
    """
    Temporarily override the default word width of this thread.
    """
    old_width = isaac_environ.width

    try:
        if width is not None:
            isaac_environ.width = get_word_spec(width).width
        yield isaac_environ.width
    finally:
        isaac_environ.width = old_width
