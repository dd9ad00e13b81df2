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

import logging
from typing import Any, Iterable, List, Optional, TYPE_CHECKING, Union

from .choice import SlashCommandOptionChoice, SlashCommandOptionChoiceBuilder
from .enums import ChannelType, SlashCommandOptionType
from .errors import InvalidOption
from .option import SlashCommandOption
from .utils import MISSING

if TYPE_CHECKING:
    from typing_extensions import Self

__all__ = ('SlashCommandOptionBuilder',)

_log = logging.getLogger(__name__)


def _build_choice(choice: Union[SlashCommandOptionChoice[Any], SlashCommandOptionChoiceBuilder]) -> SlashCommandOptionChoice[Any]:
    if isinstance(choice, SlashCommandOptionChoiceBuilder):
        return choice.build()
    if isinstance(choice, SlashCommandOptionChoice):
        return choice
    raise TypeError(f'expected SlashCommandOptionChoice or SlashCommandOptionChoiceBuilder not {choice.__class__.__name__}')


def _build_option(option: Union[SlashCommandOption, SlashCommandOptionBuilder]) -> SlashCommandOption:
    if isinstance(option, SlashCommandOptionBuilder):
        return option._build()
    if isinstance(option, SlashCommandOption):
        return option
    raise TypeError(f'expected SlashCommandOption or SlashCommandOptionBuilder not {option.__class__.__name__}')


def _check_problems(option: SlashCommandOption, strict: bool) -> None:
    problems = option.validate()
    if not problems:
        return

    if strict:
        raise InvalidOption(option.name, problems)

    for problem in problems:
        _log.warning('Option %r will likely be rejected by Discord: %s.', option.name, problem)


class SlashCommandOptionBuilder:
    """A builder for :class:`SlashCommandOption`.

    Every setter returns the builder to allow for fluent-style chaining.
    Building takes a snapshot, changing the builder afterwards does not
    affect options that were already built.

    .. container:: operations

        .. describe:: repr(x)

            Returns the builder's representation.
    """

    __slots__ = (
        '_type',
        '_name',
        '_description',
        '_required',
        '_choices',
        '_options',
        '_channel_types',
        '_integer_min_value',
        '_integer_max_value',
        '_number_min_value',
        '_number_max_value',
    )

    def __init__(self) -> None:
        self._type: SlashCommandOptionType = MISSING
        self._name: str = MISSING
        self._description: str = MISSING
        self._required: bool = False
        self._choices: List[Union[SlashCommandOptionChoice[Any], SlashCommandOptionChoiceBuilder]] = []
        self._options: List[Union[SlashCommandOption, SlashCommandOptionBuilder]] = []
        self._channel_types: List[ChannelType] = []
        self._integer_min_value: Optional[int] = None
        self._integer_max_value: Optional[int] = None
        self._number_min_value: Optional[float] = None
        self._number_max_value: Optional[float] = None

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} name={self._name!r} type={self._type!r}>'

    def set_type(self, type: SlashCommandOptionType) -> Self:
        """Sets the type of the option."""
        self._type = type
        return self

    def set_name(self, name: str) -> Self:
        """Sets the name of the option."""
        self._name = name
        return self

    def set_description(self, description: str) -> Self:
        """Sets the description of the option."""
        self._description = description
        return self

    def set_required(self, required: bool) -> Self:
        """Sets whether the option is required."""
        self._required = required
        return self

    def add_choice(self, name: str, value: Union[str, int, float]) -> Self:
        """Adds a choice to the option."""
        self._choices.append(SlashCommandOptionChoice(name=name, value=value))
        return self

    def set_choices(self, choices: Iterable[Union[SlashCommandOptionChoice[Any], SlashCommandOptionChoiceBuilder]]) -> Self:
        """Replaces the choices of the option.

        Choice builders are built when the option itself is built.
        """
        self._choices = list(choices)
        return self

    def add_option(self, option: Union[SlashCommandOption, SlashCommandOptionBuilder]) -> Self:
        """Adds a nested option to a subcommand or subcommand group."""
        self._options.append(option)
        return self

    def set_options(self, options: Iterable[Union[SlashCommandOption, SlashCommandOptionBuilder]]) -> Self:
        """Replaces the nested options of a subcommand or subcommand group.

        Option builders are built when the option itself is built.
        """
        self._options = list(options)
        return self

    def add_channel_type(self, channel_type: ChannelType) -> Self:
        """Adds a channel type to show for a channel option."""
        self._channel_types.append(channel_type)
        return self

    def set_channel_types(self, channel_types: Iterable[ChannelType]) -> Self:
        """Replaces the channel types to show for a channel option."""
        self._channel_types = list(channel_types)
        return self

    def set_integer_min_value(self, value: Optional[int]) -> Self:
        """Sets the inclusive minimum of an integer option. ``None`` removes it."""
        self._integer_min_value = value
        return self

    def set_integer_max_value(self, value: Optional[int]) -> Self:
        """Sets the inclusive maximum of an integer option. ``None`` removes it."""
        self._integer_max_value = value
        return self

    def set_number_min_value(self, value: Optional[float]) -> Self:
        """Sets the inclusive minimum of a number option. ``None`` removes it."""
        self._number_min_value = value
        return self

    def set_number_max_value(self, value: Optional[float]) -> Self:
        """Sets the inclusive maximum of a number option. ``None`` removes it."""
        self._number_max_value = value
        return self

    def _build(self) -> SlashCommandOption:
        missing = [attr for attr in ('type', 'name', 'description') if getattr(self, f'_{attr}') is MISSING]
        if missing:
            raise InvalidOption(self._name or None, [f'{attr} is not set' for attr in missing])

        options = [_build_option(option) for option in self._options]

        return SlashCommandOption(
            type=self._type,
            name=self._name,
            description=self._description,
            required=self._required,
            choices=[_build_choice(choice) for choice in self._choices],
            options=options,
            channel_types=self._channel_types,
            integer_min_value=self._integer_min_value,
            integer_max_value=self._integer_max_value,
            number_min_value=self._number_min_value,
            number_max_value=self._number_max_value,
        )

    def build(self, *, strict: bool = False) -> SlashCommandOption:
        """Builds the option, along with any nested builders.

        The built option is checked with :meth:`SlashCommandOption.validate`.
        By default every problem found is logged as a warning and the option is
        returned regardless, leaving the final say to Discord.

        Parameters
        -----------
        strict: :class:`bool`
            Whether to raise instead of logging when problems are found.

        Raises
        -------
        InvalidOption
            The type, name or description was never set, or ``strict`` is
            ``True`` and the option has problems.
        TypeError
            A nested option or choice is not of a supported type.
        """
        option = self._build()
        _check_problems(option, strict)
        return option
