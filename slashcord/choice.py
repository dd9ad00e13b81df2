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

from typing import Any, Generic, Tuple, TYPE_CHECKING, TypeVar, Union

from .enums import SlashCommandOptionType
from .errors import InvalidOption
from .utils import MISSING

if TYPE_CHECKING:
    from typing_extensions import Self

    from .types.command import ApplicationCommandOptionChoice

__all__ = (
    'SlashCommandOptionChoice',
    'SlashCommandOptionChoiceBuilder',
)

ChoiceT = TypeVar('ChoiceT', str, int, float, Union[str, int, float])


class SlashCommandOptionChoice(Generic[ChoiceT]):
    """Represents a fixed choice of a slash command option.

    If an option has any choices, they are the only valid values for a user to pick.

    .. container:: operations

        .. describe:: x == y

            Checks if two choices are equal.

        .. describe:: x != y

            Checks if two choices are not equal.

        .. describe:: hash(x)

            Returns the choice's hash.

    Parameters
    -----------
    name: :class:`str`
        The name of the choice. Used for display purposes.
    value: Union[:class:`int`, :class:`str`, :class:`float`]
        The value of the choice.
    """

    __slots__ = ('_name', '_value')

    def __init__(self, *, name: str, value: ChoiceT) -> None:
        self._name: str = name
        self._value: ChoiceT = value

    @classmethod
    def create(cls, name: str, value: ChoiceT) -> SlashCommandOptionChoice[ChoiceT]:
        """Creates a new choice. This is a convenience method."""
        return SlashCommandOptionChoiceBuilder().set_name(name).set_value(value).build()

    @classmethod
    def from_dict(cls, data: ApplicationCommandOptionChoice) -> SlashCommandOptionChoice[Any]:
        return cls(name=data['name'], value=data['value'])

    @property
    def name(self) -> str:
        """:class:`str`: The name of the choice."""
        return self._name

    @property
    def value(self) -> ChoiceT:
        """Union[:class:`int`, :class:`str`, :class:`float`]: The value of the choice."""
        return self._value

    @property
    def option_type(self) -> SlashCommandOptionType:
        """:class:`SlashCommandOptionType`: The option type this choice's value belongs to.

        Raises
        -------
        TypeError
            The value is not a :class:`str`, :class:`int` or :class:`float`.
        """
        value = self._value
        # bool is an int subclass but never a valid choice value
        if isinstance(value, bool):
            pass
        elif isinstance(value, int):
            return SlashCommandOptionType.integer
        elif isinstance(value, float):
            return SlashCommandOptionType.number
        elif isinstance(value, str):
            return SlashCommandOptionType.string

        raise TypeError(f'invalid choice value type given, expected int, str, or float but received {value.__class__!r}')

    def _key(self) -> Tuple[str, type, ChoiceT]:
        # 1, 1.0 and True are different choices
        return (self._name, self._value.__class__, self._value)

    def __eq__(self, o: object) -> bool:
        return isinstance(o, SlashCommandOptionChoice) and self._key() == o._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(name={self._name!r}, value={self._value!r})'

    def to_dict(self) -> ApplicationCommandOptionChoice:
        return {
            'name': self._name,
            'value': self._value,
        }


class SlashCommandOptionChoiceBuilder:
    """A builder for :class:`SlashCommandOptionChoice`.

    Every setter returns the builder to allow for fluent-style chaining.
    """

    __slots__ = ('_name', '_value')

    def __init__(self) -> None:
        self._name: str = MISSING
        self._value: Any = MISSING

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} name={self._name!r} value={self._value!r}>'

    def set_name(self, name: str) -> Self:
        """Sets the name of the choice."""
        self._name = name
        return self

    def set_value(self, value: Union[str, int, float]) -> Self:
        """Sets the value of the choice."""
        self._value = value
        return self

    def build(self) -> SlashCommandOptionChoice[Any]:
        """Builds the choice.

        Raises
        -------
        InvalidOption
            The name or the value was never set.
        """
        problems = []
        if self._name is MISSING:
            problems.append('choice name is not set')
        if self._value is MISSING:
            problems.append('choice value is not set')
        if problems:
            raise InvalidOption(self._name or None, problems)

        return SlashCommandOptionChoice(name=self._name, value=self._value)
