"""
The MIT License (MIT)

Copyright (c) 2015-present Rapptz

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
DEALINGS IN THE SOFTWARE.
"""

from __future__ import annotations

from typing import List, Optional

__all__ = (
    'SlashcordException',
    'InvalidOption',
)


class SlashcordException(Exception):
    """Base exception class for slashcord

    Ideally speaking, this could be caught to handle any exceptions raised from this library.
    """

    __slots__ = ()


class InvalidOption(SlashcordException):
    """Exception that's raised when a builder is asked to build something
    that cannot be represented, or that would be rejected by Discord when
    building in strict mode.

    This inherits from :exc:`SlashcordException`.

    Attributes
    -----------
    name: Optional[:class:`str`]
        The name of the option or command that failed to build, if it was set.
    problems: List[:class:`str`]
        Every problem that was found.
    """

    def __init__(self, name: Optional[str], problems: List[str]) -> None:
        self.name: Optional[str] = name
        self.problems: List[str] = problems

        if name:
            fmt = f'{name!r} is invalid: '
        else:
            fmt = 'invalid option: '
        super().__init__(fmt + '; '.join(problems))
