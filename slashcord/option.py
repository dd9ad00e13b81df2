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

from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, TYPE_CHECKING, Union

from .choice import SlashCommandOptionChoice
from .enums import ChannelType, SlashCommandOptionType, try_enum
from .utils import _flatten

if TYPE_CHECKING:
    from .builder import SlashCommandOptionBuilder
    from .choice import SlashCommandOptionChoiceBuilder
    from .types.command import ApplicationCommandOption

    OptionLike = Union['SlashCommandOption', SlashCommandOptionBuilder]
    ChoiceLike = Union[SlashCommandOptionChoice[Any], SlashCommandOptionChoiceBuilder]

__all__ = ('SlashCommandOption',)

MAX_CHOICES = 25
MAX_OPTIONS = 25


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class SlashCommandOption:
    """Represents a slash command's option, i.e. a parameter of the command.

    Options are read-only snapshots. They are usually created through
    :class:`SlashCommandOptionBuilder` or one of the convenience factory
    class methods such as :meth:`create` and :meth:`create_integer_option`.

    Fields that do not apply to the option's :attr:`type` are expected to be
    empty. Nothing here enforces that; see :meth:`validate`.

    .. container:: operations

        .. describe:: x == y

            Checks if two options are equal.

        .. describe:: x != y

            Checks if two options are not equal.

        .. describe:: hash(x)

            Returns the option's hash.

        .. describe:: str(x)

            Returns the option's name.
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

    def __init__(
        self,
        *,
        type: SlashCommandOptionType,
        name: str,
        description: str,
        required: bool = False,
        choices: Iterable[SlashCommandOptionChoice[Any]] = (),
        options: Iterable[SlashCommandOption] = (),
        channel_types: Iterable[ChannelType] = (),
        integer_min_value: Optional[int] = None,
        integer_max_value: Optional[int] = None,
        number_min_value: Optional[float] = None,
        number_max_value: Optional[float] = None,
    ) -> None:
        self._type: SlashCommandOptionType = type
        self._name: str = name
        self._description: str = description
        self._required: bool = required
        self._choices: Tuple[SlashCommandOptionChoice[Any], ...] = tuple(choices)
        self._options: Tuple[SlashCommandOption, ...] = tuple(options)
        self._channel_types: FrozenSet[ChannelType] = frozenset(channel_types)
        self._integer_min_value: Optional[int] = integer_min_value
        self._integer_max_value: Optional[int] = integer_max_value
        self._number_min_value: Optional[float] = number_min_value
        self._number_max_value: Optional[float] = number_max_value

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} name={self._name!r} type={self._type!r} required={self._required}>'

    def __str__(self) -> str:
        return self._name

    def _key(self) -> Tuple[Any, ...]:
        return (
            self._type,
            self._name,
            self._description,
            self._required,
            self._choices,
            self._options,
            self._channel_types,
            self._integer_min_value,
            self._integer_max_value,
            self._number_min_value,
            self._number_max_value,
        )

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SlashCommandOption) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def type(self) -> SlashCommandOptionType:
        """:class:`SlashCommandOptionType`: The type of this option."""
        return self._type

    @property
    def name(self) -> str:
        """:class:`str`: The name of this option."""
        return self._name

    @property
    def description(self) -> str:
        """:class:`str`: The description of this option."""
        return self._description

    @property
    def required(self) -> bool:
        """:class:`bool`: Whether this option is required."""
        return self._required

    @property
    def choices(self) -> List[SlashCommandOptionChoice[Any]]:
        """List[:class:`SlashCommandOptionChoice`]: The choices of this option.

        If this option has any choices, they are the only valid values for a user to pick.
        """
        return list(self._choices)

    @property
    def options(self) -> List[SlashCommandOption]:
        """List[:class:`SlashCommandOption`]: The nested options.

        These are the parameters of a subcommand, or the subcommands of a subcommand group.
        """
        return list(self._options)

    @property
    def channel_types(self) -> FrozenSet[ChannelType]:
        """FrozenSet[:class:`ChannelType`]: The channel types shown for a :attr:`~SlashCommandOptionType.channel` option."""
        return self._channel_types

    @property
    def integer_min_value(self) -> Optional[int]:
        """Optional[:class:`int`]: The minimum value permitted for an :attr:`~SlashCommandOptionType.integer` option."""
        return self._integer_min_value

    @property
    def integer_max_value(self) -> Optional[int]:
        """Optional[:class:`int`]: The maximum value permitted for an :attr:`~SlashCommandOptionType.integer` option."""
        return self._integer_max_value

    @property
    def number_min_value(self) -> Optional[float]:
        """Optional[:class:`float`]: The minimum value permitted for a :attr:`~SlashCommandOptionType.number` option."""
        return self._number_min_value

    @property
    def number_max_value(self) -> Optional[float]:
        """Optional[:class:`float`]: The maximum value permitted for a :attr:`~SlashCommandOptionType.number` option."""
        return self._number_max_value

    @classmethod
    def create(
        cls,
        type: SlashCommandOptionType,
        name: str,
        description: str,
        required: bool = False,
    ) -> SlashCommandOption:
        """Creates a new option. This is a convenience method.

        Parameters
        -----------
        type: :class:`SlashCommandOptionType`
            The type of the option.
        name: :class:`str`
            The name of the option.
        description: :class:`str`
            The description of the option.
        required: :class:`bool`
            Whether this option is required. Defaults to ``False``.
        """
        from .builder import SlashCommandOptionBuilder

        return SlashCommandOptionBuilder().set_type(type).set_name(name).set_description(description).set_required(required).build()

    @classmethod
    def create_with_options(
        cls,
        type: SlashCommandOptionType,
        name: str,
        description: str,
        *options: Union[OptionLike, Iterable[OptionLike]],
    ) -> SlashCommandOption:
        """Creates a new subcommand or subcommand group. This is a convenience method.

        The nested options can be given either one by one or as a single list,
        and each may be a built option or a builder, which is built first.
        Their order is kept.

        Parameters
        -----------
        type: :class:`SlashCommandOptionType`
            The type of the option. Should be either
            :attr:`~SlashCommandOptionType.subcommand` or :attr:`~SlashCommandOptionType.subcommand_group`.
        name: :class:`str`
            The name of the option.
        description: :class:`str`
            The description of the option.
        \\*options
            The options of this subcommand or subcommand group.
        """
        from .builder import SlashCommandOptionBuilder

        return (
            SlashCommandOptionBuilder()
            .set_type(type)
            .set_name(name)
            .set_description(description)
            .set_options(_flatten(options))
            .build()
        )

    @classmethod
    def create_with_choices(
        cls,
        type: SlashCommandOptionType,
        name: str,
        description: str,
        required: bool,
        *choices: Union[ChoiceLike, Iterable[ChoiceLike]],
    ) -> SlashCommandOption:
        """Creates a new option restricted to a fixed set of choices. This is a convenience method.

        The choices can be given either one by one or as a single list, and
        each may be a built choice or a builder, which is built first.
        Their order is kept.
        """
        from .builder import SlashCommandOptionBuilder

        return (
            SlashCommandOptionBuilder()
            .set_type(type)
            .set_name(name)
            .set_description(description)
            .set_required(required)
            .set_choices(_flatten(choices))
            .build()
        )

    @classmethod
    def create_channel_option(
        cls,
        name: str,
        description: str,
        required: bool,
        channel_types: Iterable[ChannelType],
    ) -> SlashCommandOption:
        """Creates a new :attr:`~SlashCommandOptionType.channel` option showing
        only the given channel types. This is a convenience method.
        """
        from .builder import SlashCommandOptionBuilder

        return (
            SlashCommandOptionBuilder()
            .set_type(SlashCommandOptionType.channel)
            .set_name(name)
            .set_description(description)
            .set_required(required)
            .set_channel_types(channel_types)
            .build()
        )

    @classmethod
    def create_number_option(
        cls,
        name: str,
        description: str,
        required: bool,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None,
    ) -> SlashCommandOption:
        """Creates a new :attr:`~SlashCommandOptionType.number` option. This is a convenience method.

        Parameters
        -----------
        name: :class:`str`
            The name of the option.
        description: :class:`str`
            The description of the option.
        required: :class:`bool`
            Whether this option is required.
        min_value: Optional[:class:`float`]
            The minimum value permitted, inclusive.
        max_value: Optional[:class:`float`]
            The maximum value permitted, inclusive.
        """
        from .builder import SlashCommandOptionBuilder

        return (
            SlashCommandOptionBuilder()
            .set_type(SlashCommandOptionType.number)
            .set_name(name)
            .set_description(description)
            .set_required(required)
            .set_number_min_value(min_value)
            .set_number_max_value(max_value)
            .build()
        )

    @classmethod
    def create_integer_option(
        cls,
        name: str,
        description: str,
        required: bool,
        min_value: Optional[int] = None,
        max_value: Optional[int] = None,
    ) -> SlashCommandOption:
        """Creates a new :attr:`~SlashCommandOptionType.integer` option. This is a convenience method.

        Parameters
        -----------
        name: :class:`str`
            The name of the option.
        description: :class:`str`
            The description of the option.
        required: :class:`bool`
            Whether this option is required.
        min_value: Optional[:class:`int`]
            The minimum value permitted, inclusive.
        max_value: Optional[:class:`int`]
            The maximum value permitted, inclusive.
        """
        from .builder import SlashCommandOptionBuilder

        return (
            SlashCommandOptionBuilder()
            .set_type(SlashCommandOptionType.integer)
            .set_name(name)
            .set_description(description)
            .set_required(required)
            .set_integer_min_value(min_value)
            .set_integer_max_value(max_value)
            .build()
        )

    def to_builder(self) -> SlashCommandOptionBuilder:
        """Returns a builder pre-populated with this option's values."""
        from .builder import SlashCommandOptionBuilder

        return (
            SlashCommandOptionBuilder()
            .set_type(self._type)
            .set_name(self._name)
            .set_description(self._description)
            .set_required(self._required)
            .set_choices(self._choices)
            .set_options(self._options)
            .set_channel_types(self._channel_types)
            .set_integer_min_value(self._integer_min_value)
            .set_integer_max_value(self._integer_max_value)
            .set_number_min_value(self._number_min_value)
            .set_number_max_value(self._number_max_value)
        )

    def walk_options(self) -> Iterator[SlashCommandOption]:
        """An iterator that recursively walks through the nested options, depth first."""
        for option in self._options:
            yield option
            yield from option.walk_options()

    def _bounds(self) -> Tuple[Optional[Union[int, float]], Optional[Union[int, float]]]:
        integer = (self._integer_min_value, self._integer_max_value)
        number = (self._number_min_value, self._number_max_value)
        if self._type is SlashCommandOptionType.number:
            integer, number = number, integer

        return (
            integer[0] if integer[0] is not None else number[0],
            integer[1] if integer[1] is not None else number[1],
        )

    def validate(self) -> List[str]:
        """Checks this option, and every nested option, for combinations Discord would reject.

        Returns
        --------
        List[:class:`str`]
            A description of every problem found. Empty if none were found.
        """
        problems: List[str] = []
        option_type = self._type

        if not self._name:
            problems.append('name must not be empty')
        if not self._description:
            problems.append('description must not be empty')

        if self._choices:
            if not option_type.accepts_choices:
                problems.append('choices are only supported by string, integer and number options')
            else:
                for choice in self._choices:
                    try:
                        choice_type = choice.option_type
                    except TypeError as e:
                        problems.append(f'choice {choice.name!r}: {e}')
                        continue

                    # whole numbers are valid number choices
                    compatible = choice_type is option_type or (
                        option_type is SlashCommandOptionType.number and choice_type is SlashCommandOptionType.integer
                    )
                    if not compatible:
                        problems.append(f'choice {choice.name!r} has a {choice_type.name} value in a {option_type.name} option')
            if len(self._choices) > MAX_CHOICES:
                problems.append(f'too many choices ({len(self._choices)} > {MAX_CHOICES})')

        if self._options:
            if not option_type.is_nested:
                problems.append('nested options are only supported by subcommand and subcommand group options')
            elif option_type is SlashCommandOptionType.subcommand_group:
                for option in self._options:
                    if option.type is not SlashCommandOptionType.subcommand:
                        problems.append(f'subcommand groups can only contain subcommands, not {option.name!r}')
            else:
                for option in self._options:
                    if option.type.is_nested:
                        problems.append(f'subcommands cannot contain {option.type.name} {option.name!r}')
            if len(self._options) > MAX_OPTIONS:
                problems.append(f'too many nested options ({len(self._options)} > {MAX_OPTIONS})')

        if self._channel_types and option_type is not SlashCommandOptionType.channel:
            problems.append('channel types are only supported by channel options')

        has_integer_bounds = self._integer_min_value is not None or self._integer_max_value is not None
        has_number_bounds = self._number_min_value is not None or self._number_max_value is not None
        if has_integer_bounds and option_type is not SlashCommandOptionType.integer:
            problems.append('integer bounds are only supported by integer options')
        if has_number_bounds and option_type is not SlashCommandOptionType.number:
            problems.append('number bounds are only supported by number options')

        for kind, low, high in (
            ('integer', self._integer_min_value, self._integer_max_value),
            ('number', self._number_min_value, self._number_max_value),
        ):
            if low is not None and high is not None and low > high:
                problems.append(f'{kind} minimum {low!r} is greater than maximum {high!r}')

        for option in self._options:
            problems.extend(f'{option.name}: {problem}' for problem in option.validate())

        return problems

    def to_dict(self) -> ApplicationCommandOption:
        base: Dict[str, Any] = {
            'type': self._type.value,
            'name': self._name,
            'description': self._description,
        }

        if not self._type.is_nested:
            base['required'] = self._required
        if self._choices:
            base['choices'] = [choice.to_dict() for choice in self._choices]
        if self._channel_types:
            base['channel_types'] = sorted(t.value for t in self._channel_types)

        min_value, max_value = self._bounds()
        if min_value is not None:
            base['min_value'] = min_value
        if max_value is not None:
            base['max_value'] = max_value

        if self._type.is_nested or self._options:
            base['options'] = [option.to_dict() for option in self._options]

        return base  # type: ignore # Type checker does not understand this literal.

    @classmethod
    def from_dict(cls, data: ApplicationCommandOption) -> SlashCommandOption:
        option_type = try_enum(SlashCommandOptionType, data['type'])
        bounds: Dict[str, Any] = {}
        for key in ('min_value', 'max_value'):
            value = data.get(key)
            if value is None:
                continue

            if option_type is SlashCommandOptionType.integer:
                bounds[f'integer_{key}'] = int(value)
            elif option_type is SlashCommandOptionType.number:
                bounds[f'number_{key}'] = float(value)
            elif _is_integer(value):
                bounds[f'integer_{key}'] = value
            else:
                bounds[f'number_{key}'] = value

        return cls(
            type=option_type,
            name=data['name'],
            description=data['description'],
            required=data.get('required', False),
            choices=[SlashCommandOptionChoice.from_dict(d) for d in data.get('choices', [])],
            options=[cls.from_dict(d) for d in data.get('options', [])],
            channel_types=[try_enum(ChannelType, d) for d in data.get('channel_types', [])],
            **bounds,
        )

