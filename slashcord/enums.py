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

import types
from collections import namedtuple
from typing import Any, ClassVar, Dict, List, TYPE_CHECKING, Tuple, Type, TypeVar, Iterator, Mapping

__all__ = (
    'Enum',
    'ChannelType',
    'SlashCommandOptionType',
)


def _make_member_cls(enum_name: str):
    cls = namedtuple('_Member_' + enum_name, 'name value')
    cls.__repr__ = lambda self: f'<{enum_name}.{self.name}: {self.value!r}>'  # type: ignore
    cls.__str__ = lambda self: f'{enum_name}.{self.name}'  # type: ignore
    return cls


class EnumMeta(type):
    if TYPE_CHECKING:
        __name__: ClassVar[str]
        _member_names_: ClassVar[List[str]]
        _member_map_: ClassVar[Dict[str, Any]]
        _value_map_: ClassVar[Dict[Any, Any]]

    def __new__(cls, name: str, bases: Tuple[type, ...], attrs: Dict[str, Any]) -> EnumMeta:
        by_value: Dict[Any, Any] = {}
        by_name: Dict[str, Any] = {}
        names: List[str] = []

        member_cls = _make_member_cls(name)
        for key, value in list(attrs.items()):
            # properties and plain methods live on the members themselves
            if hasattr(value, '__get__') and not isinstance(value, (classmethod, staticmethod)):
                if key.startswith('__') and key not in ('__str__', '__repr__'):
                    continue
                setattr(member_cls, key, value)
                del attrs[key]
                continue

            if key.startswith('_') or isinstance(value, (classmethod, staticmethod)):
                continue

            member = by_value.get(value)
            if member is None:
                member = by_value[value] = member_cls(name=key, value=value)
                names.append(key)

            by_name[key] = member
            attrs[key] = member

        attrs['_value_map_'] = by_value
        attrs['_member_map_'] = by_name
        attrs['_member_names_'] = names
        attrs['_member_cls_'] = member_cls
        enum_cls = super().__new__(cls, name, bases, attrs)
        member_cls._enum_cls_ = enum_cls  # type: ignore
        return enum_cls

    def __iter__(cls) -> Iterator[Any]:
        return (cls._member_map_[name] for name in cls._member_names_)

    def __len__(cls) -> int:
        return len(cls._member_names_)

    def __repr__(cls) -> str:
        return f'<enum {cls.__name__}>'

    @property
    def __members__(cls) -> Mapping[str, Any]:
        return types.MappingProxyType(cls._member_map_)

    def __call__(cls, value: Any) -> Any:
        try:
            return cls._value_map_[value]
        except (KeyError, TypeError):
            raise ValueError(f'{value!r} is not a valid {cls.__name__}') from None

    def __getitem__(cls, key: str) -> Any:
        return cls._member_map_[key]

    def __setattr__(cls, name: str, value: Any) -> None:
        raise TypeError('Enums are immutable.')

    def __delattr__(cls, attr: str) -> None:
        raise TypeError('Enums are immutable.')

    def __instancecheck__(self, instance: Any) -> bool:
        return getattr(instance, '_enum_cls_', None) is self


if TYPE_CHECKING:
    from enum import Enum
else:

    class Enum(metaclass=EnumMeta):
        pass


class ChannelType(Enum):
    text = 0
    private = 1
    voice = 2
    group = 3
    category = 4
    news = 5
    news_thread = 10
    public_thread = 11
    private_thread = 12
    stage_voice = 13
    forum = 15
    media = 16

    def __str__(self) -> str:
        return self.name


class SlashCommandOptionType(Enum):
    subcommand = 1
    subcommand_group = 2
    string = 3
    integer = 4
    boolean = 5
    user = 6
    channel = 7
    role = 8
    mentionable = 9
    number = 10
    attachment = 11

    @property
    def is_nested(self) -> bool:
        """:class:`bool`: Whether options of this type hold nested options."""
        return self.value in (1, 2)

    @property
    def accepts_choices(self) -> bool:
        """:class:`bool`: Whether options of this type can restrict input to fixed choices."""
        return self.value in (3, 4, 10)


E = TypeVar('E', bound='Enum')


def try_enum(cls: Type[E], val: Any) -> E:
    """A function that tries to turn the value into enum ``cls``.

    If it fails it returns a proxy ``unknown_<value>`` member instead, so payloads
    carrying values this library does not know about yet still round trip.
    """

    try:
        return cls._value_map_[val]  # type: ignore
    except (KeyError, TypeError, AttributeError):
        return cls._member_cls_(name=f'unknown_{val}', value=val)  # type: ignore
