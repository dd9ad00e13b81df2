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

import pytest

from slashcord import ChannelType, SlashCommandOptionType
from slashcord.enums import try_enum


def test_enum_lookup():
    assert SlashCommandOptionType(4) is SlashCommandOptionType.integer
    assert SlashCommandOptionType['number'] is SlashCommandOptionType.number
    assert isinstance(ChannelType.text, ChannelType)
    assert not isinstance(ChannelType.text, SlashCommandOptionType)
    assert str(ChannelType.news_thread) == 'news_thread'
    assert repr(SlashCommandOptionType.string) == '<SlashCommandOptionType.string: 3>'


def test_enum_order():
    assert [t.value for t in SlashCommandOptionType] == list(range(1, 12))
    assert len(ChannelType) == 12


def test_enum_invalid():
    with pytest.raises(ValueError):
        SlashCommandOptionType(0)


def test_enum_immutable():
    with pytest.raises(TypeError):
        SlashCommandOptionType.string = 5  # type: ignore


@pytest.mark.parametrize(
    ('option_type', 'nested', 'choices'),
    [
        (SlashCommandOptionType.subcommand, True, False),
        (SlashCommandOptionType.subcommand_group, True, False),
        (SlashCommandOptionType.string, False, True),
        (SlashCommandOptionType.integer, False, True),
        (SlashCommandOptionType.number, False, True),
        (SlashCommandOptionType.boolean, False, False),
        (SlashCommandOptionType.channel, False, False),
    ],
)
def test_option_type_properties(option_type, nested, choices):
    assert option_type.is_nested is nested
    assert option_type.accepts_choices is choices


def test_try_enum():
    assert try_enum(ChannelType, 2) is ChannelType.voice

    unknown = try_enum(ChannelType, 99)
    assert unknown.name == 'unknown_99'
    assert unknown.value == 99
    assert isinstance(unknown, ChannelType)
