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

import json
import logging

import pytest

from slashcord import (
    InvalidOption,
    SlashCommand,
    SlashCommandBuilder,
    SlashCommandOption,
    SlashCommandOptionBuilder,
    SlashCommandOptionType,
)


def _tag_command(**kwargs):
    create = SlashCommandOption.create_with_options(
        SlashCommandOptionType.subcommand,
        'create',
        'Create a tag',
        SlashCommandOption.create(SlashCommandOptionType.string, 'name', 'Tag name', True),
        SlashCommandOption.create(SlashCommandOptionType.string, 'content', 'Tag content', True),
    )
    delete = SlashCommandOption.create_with_options(
        SlashCommandOptionType.subcommand,
        'delete',
        'Delete a tag',
        SlashCommandOption.create(SlashCommandOptionType.string, 'name', 'Tag name', True),
    )
    builder = SlashCommandBuilder().set_name('tag').set_description('Manage tags').set_options([create, delete])
    return builder.build(**kwargs)


def test_command_payload():
    command = _tag_command()
    payload = command.to_dict()

    assert payload['type'] == 1
    assert payload['name'] == 'tag'
    assert payload['nsfw'] is False
    assert 'default_member_permissions' not in payload
    assert [o['name'] for o in payload['options']] == ['create', 'delete']
    assert command.validate() == []


def test_command_get_option():
    command = _tag_command()

    assert command.get_option('create').type is SlashCommandOptionType.subcommand  # type: ignore
    assert command.get_option('create content').name == 'content'  # type: ignore
    assert command.get_option('create missing') is None
    assert command.get_option('rename') is None
    assert [o.name for o in command.walk_options()] == ['create', 'name', 'content', 'delete', 'name']


def test_command_json_round_trip():
    command = (
        SlashCommandBuilder()
        .set_name('ban')
        .set_description('Ban a member')
        .add_option(SlashCommandOptionBuilder().set_type(SlashCommandOptionType.user).set_name('member').set_description('Who'))
        .add_option(SlashCommandOption.create_integer_option('days', 'Days of messages to delete', False, 0, 7))
        .set_default_member_permissions(1 << 2)
        .set_nsfw(True)
        .build()
    )

    data = json.loads(command.to_json())
    assert data['default_member_permissions'] == '4'
    assert data['options'][1]['min_value'] == 0

    restored = SlashCommand.from_json(command.to_json())
    assert restored == command
    assert restored.default_member_permissions == 4
    assert restored.nsfw is True


def test_command_builder_missing():
    with pytest.raises(InvalidOption) as excinfo:
        SlashCommandBuilder().set_name('ping').build()

    assert excinfo.value.problems == ['description is not set']


def test_command_mixed_options(caplog):
    builder = (
        SlashCommandBuilder()
        .set_name('mixed')
        .set_description('Mixed')
        .add_option(SlashCommandOption.create_with_options(SlashCommandOptionType.subcommand, 'sub', 'Sub'))
        .add_option(SlashCommandOption.create(SlashCommandOptionType.string, 'text', 'Text'))
    )

    with caplog.at_level(logging.WARNING, logger='slashcord'):
        command = builder.build()

    assert command.name == 'mixed'
    assert 'cannot be mixed' in caplog.text

    with pytest.raises(InvalidOption):
        builder.build(strict=True)


def test_command_too_many_options():
    command = (
        SlashCommandBuilder()
        .set_name('wide')
        .set_description('Wide')
        .set_options([SlashCommandOption.create(SlashCommandOptionType.string, f'o{i}', 'Option') for i in range(26)])
        .build()
    )

    assert 'too many options (26 > 25)' in command.validate()
