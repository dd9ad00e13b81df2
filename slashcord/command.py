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
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, TYPE_CHECKING, Union

from .builder import SlashCommandOptionBuilder, _build_option
from .errors import InvalidOption
from .option import MAX_OPTIONS, SlashCommandOption
from .utils import MISSING, _from_json, _to_json

if TYPE_CHECKING:
    from typing_extensions import Self

    from .types.command import ApplicationCommand as ApplicationCommandPayload

__all__ = (
    'SlashCommand',
    'SlashCommandBuilder',
)

_log = logging.getLogger(__name__)


class SlashCommand:
    """Represents the definition of a slash command, ready to be sent to Discord.

    .. container:: operations

        .. describe:: x == y

            Checks if two command definitions are equal.

        .. describe:: x != y

            Checks if two command definitions are not equal.

        .. describe:: str(x)

            Returns the command's name.

    Attributes
    -----------
    name: :class:`str`
        The name of the command.
    description: :class:`str`
        The description of the command.
    default_member_permissions: Optional[:class:`int`]
        The permission bits a member needs to use the command by default.
        ``None`` means everyone can use it.
    nsfw: :class:`bool`
        Whether the command can only be used in NSFW channels.
    """

    __slots__ = ('name', 'description', 'default_member_permissions', 'nsfw', '_options')

    def __init__(
        self,
        *,
        name: str,
        description: str,
        options: Iterable[SlashCommandOption] = (),
        default_member_permissions: Optional[int] = None,
        nsfw: bool = False,
    ) -> None:
        self.name: str = name
        self.description: str = description
        self._options: Tuple[SlashCommandOption, ...] = tuple(options)
        self.default_member_permissions: Optional[int] = default_member_permissions
        self.nsfw: bool = nsfw

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} name={self.name!r} options={len(self._options)}>'

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SlashCommand) and self.to_dict() == other.to_dict()

    @property
    def options(self) -> List[SlashCommandOption]:
        """List[:class:`SlashCommandOption`]: The top level options of the command."""
        return list(self._options)

    def walk_options(self) -> Iterator[SlashCommandOption]:
        """An iterator that recursively walks through every option of the command, depth first."""
        for option in self._options:
            yield option
            yield from option.walk_options()

    def get_option(self, name: str) -> Optional[SlashCommandOption]:
        """Retrieves an option by its space separated path, e.g. ``'tag create name'``.

        Returns ``None`` if no option was found.
        """
        options = self._options
        found = None
        for part in name.split():
            found = next((o for o in options if o.name == part), None)
            if found is None:
                return None
            options = tuple(found.options)
        return found

    def validate(self) -> List[str]:
        """Checks the command and all of its options for combinations Discord would reject."""
        problems: List[str] = []
        if not self.name:
            problems.append('name must not be empty')
        if not self.description:
            problems.append('description must not be empty')
        if len(self._options) > MAX_OPTIONS:
            problems.append(f'too many options ({len(self._options)} > {MAX_OPTIONS})')

        nested = [option.type.is_nested for option in self._options]
        if any(nested) and not all(nested):
            problems.append('subcommands and subcommand groups cannot be mixed with other options')

        for option in self._options:
            problems.extend(f'{option.name}: {problem}' for problem in option.validate())
        return problems

    def to_dict(self) -> ApplicationCommandPayload:
        payload: Dict[str, Any] = {
            'type': 1,
            'name': self.name,
            'description': self.description,
            'options': [option.to_dict() for option in self._options],
            'nsfw': self.nsfw,
        }
        if self.default_member_permissions is not None:
            payload['default_member_permissions'] = str(self.default_member_permissions)
        return payload  # type: ignore # Type checker does not understand this literal.

    def to_json(self) -> str:
        """:class:`str`: The command payload encoded as compact JSON."""
        return _to_json(self.to_dict())

    @classmethod
    def from_dict(cls, data: ApplicationCommandPayload) -> SlashCommand:
        permissions = data.get('default_member_permissions')
        return cls(
            name=data['name'],
            description=data['description'],
            options=[SlashCommandOption.from_dict(d) for d in data.get('options', [])],
            default_member_permissions=int(permissions) if permissions is not None else None,
            nsfw=data.get('nsfw', False),
        )

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> SlashCommand:
        return cls.from_dict(_from_json(data))


class SlashCommandBuilder:
    """A builder for :class:`SlashCommand`.

    Every setter returns the builder to allow for fluent-style chaining.
    """

    __slots__ = ('_name', '_description', '_options', '_default_member_permissions', '_nsfw')

    def __init__(self) -> None:
        self._name: str = MISSING
        self._description: str = MISSING
        self._options: List[Union[SlashCommandOption, SlashCommandOptionBuilder]] = []
        self._default_member_permissions: Optional[int] = None
        self._nsfw: bool = False

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} name={self._name!r}>'

    def set_name(self, name: str) -> Self:
        self._name = name
        return self

    def set_description(self, description: str) -> Self:
        self._description = description
        return self

    def add_option(self, option: Union[SlashCommandOption, SlashCommandOptionBuilder]) -> Self:
        self._options.append(option)
        return self

    def set_options(self, options: Iterable[Union[SlashCommandOption, SlashCommandOptionBuilder]]) -> Self:
        self._options = list(options)
        return self

    def set_default_member_permissions(self, permissions: Optional[int]) -> Self:
        self._default_member_permissions = permissions
        return self

    def set_nsfw(self, nsfw: bool) -> Self:
        self._nsfw = nsfw
        return self

    def build(self, *, strict: bool = False) -> SlashCommand:
        """Builds the command definition, along with any option builders.

        Problems are handled the same way as :meth:`SlashCommandOptionBuilder.build`.

        Raises
        -------
        InvalidOption
            The name or description was never set, or ``strict`` is ``True``
            and the command has problems.
        TypeError
            An option is not of a supported type.
        """
        missing = [attr for attr in ('name', 'description') if getattr(self, f'_{attr}') is MISSING]
        if missing:
            raise InvalidOption(self._name or None, [f'{attr} is not set' for attr in missing])

        options = [_build_option(option) for option in self._options]
        command = SlashCommand(
            name=self._name,
            description=self._description,
            options=options,
            default_member_permissions=self._default_member_permissions,
            nsfw=self._nsfw,
        )

        problems = command.validate()
        if problems:
            if strict:
                raise InvalidOption(command.name, problems)
            for problem in problems:
                _log.warning('Command %r will likely be rejected by Discord: %s.', command.name, problem)

        _log.debug('Built command %r with %d option(s).', command.name, len(options))
        return command
