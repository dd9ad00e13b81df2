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

import logging

import pytest

from slashcord import (
    ChannelType,
    InvalidOption,
    SlashCommandBuilder,
    SlashCommandOption,
    SlashCommandOptionBuilder,
    SlashCommandOptionChoice,
    SlashCommandOptionChoiceBuilder,
    SlashCommandOptionType,
)


def _string_builder(name='name'):
    return SlashCommandOptionBuilder().set_type(SlashCommandOptionType.string).set_name(name).set_description('Desc')


def test_builder_round_trip():
    option = (
        SlashCommandOptionBuilder()
        .set_type(SlashCommandOptionType.channel)
        .set_name('target')
        .set_description('Where to go')
        .set_required(True)
        .add_channel_type(ChannelType.forum)
        .add_channel_type(ChannelType.media)
        .build()
    )

    assert option.type is SlashCommandOptionType.channel
    assert option.name == 'target'
    assert option.description == 'Where to go'
    assert option.required is True
    assert option.channel_types == {ChannelType.forum, ChannelType.media}


def test_builder_snapshot():
    builder = _string_builder().add_choice('A', 'a')
    first = builder.build()
    builder.add_choice('B', 'b').set_name('renamed')

    assert first.name == 'name'
    assert [c.name for c in first.choices] == ['A']
    assert [c.name for c in builder.build().choices] == ['A', 'B']


def test_builder_builds_nested_builders():
    option = (
        SlashCommandOptionBuilder()
        .set_type(SlashCommandOptionType.subcommand)
        .set_name('sub')
        .set_description('Sub')
        .add_option(_string_builder('first'))
        .add_option(SlashCommandOption.create(SlashCommandOptionType.user, 'second', 'Second'))
        .build()
    )

    assert all(isinstance(o, SlashCommandOption) for o in option.options)
    assert [o.name for o in option.options] == ['first', 'second']


def test_builder_builds_choice_builders():
    option = (
        _string_builder()
        .set_choices(
            [
                SlashCommandOptionChoiceBuilder().set_name('One').set_value('1'),
                SlashCommandOptionChoice(name='Two', value='2'),
            ]
        )
        .build()
    )

    assert option.choices == [SlashCommandOptionChoice(name='One', value='1'), SlashCommandOptionChoice(name='Two', value='2')]


@pytest.mark.parametrize('missing', ['type', 'name', 'description'])
def test_builder_missing_fields(missing):
    builder = SlashCommandOptionBuilder()
    if missing != 'type':
        builder.set_type(SlashCommandOptionType.string)
    if missing != 'name':
        builder.set_name('name')
    if missing != 'description':
        builder.set_description('desc')

    with pytest.raises(InvalidOption) as excinfo:
        builder.build()

    assert excinfo.value.problems == [f'{missing} is not set']


def test_builder_rejects_wrong_nested_type():
    builder = SlashCommandOptionBuilder().set_type(SlashCommandOptionType.subcommand).set_name('sub').set_description('Sub')
    builder.add_option('not an option')  # type: ignore

    with pytest.raises(TypeError):
        builder.build()


def test_command_builder_rejects_wrong_option_type():
    builder = SlashCommandBuilder().set_name('x').set_description('y').add_option('not an option')  # type: ignore

    with pytest.raises(TypeError):
        builder.build()


def test_builder_logs_problems(caplog):
    builder = _string_builder('text').add_channel_type(ChannelType.text)

    with caplog.at_level(logging.WARNING, logger='slashcord'):
        option = builder.build()

    assert option.channel_types == {ChannelType.text}
    assert 'channel types are only supported by channel options' in caplog.text
    assert "'text'" in caplog.text


def test_builder_strict():
    builder = _string_builder('text').set_integer_min_value(1)

    with pytest.raises(InvalidOption) as excinfo:
        builder.build(strict=True)

    assert excinfo.value.name == 'text'
    assert excinfo.value.problems == ['integer bounds are only supported by integer options']
    assert 'text' in str(excinfo.value)


def test_builder_strict_checks_nested_builders():
    builder = (
        SlashCommandOptionBuilder()
        .set_type(SlashCommandOptionType.subcommand_group)
        .set_name('group')
        .set_description('Group')
        .add_option(_string_builder('loose'))
    )

    with pytest.raises(InvalidOption) as excinfo:
        builder.build(strict=True)

    assert "subcommand groups can only contain subcommands, not 'loose'" in excinfo.value.problems


def test_builder_clears_bounds():
    option = (
        SlashCommandOptionBuilder()
        .set_type(SlashCommandOptionType.number)
        .set_name('n')
        .set_description('N')
        .set_number_min_value(1.5)
        .set_number_min_value(None)
        .build()
    )
    assert option.number_min_value is None
