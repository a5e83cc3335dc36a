from __future__ import annotations

from orjson import loads
import pytest

from appcmd import (
    ApplicationCommand,
    ApplicationCommandOption,
    ApplicationCommandOptionChoice,
    ApplicationCommandOptionType,
    ApplicationCommandType,
    ChannelType,
    Locale,
    Permission,
    SerializationError,
    as_payload,
    serialize,
    serialize_many,
    validate
)


def test_ping(ping: ApplicationCommand) -> None:
    validate(ping)

    assert serialize(ping) == (
        '{"name":"ping","description":"Replies with pong",'
        '"default_permission":true,"nsfw":false}'
    )
    assert ping.to_json() == serialize(ping)


def test_command_omits_every_absent_field() -> None:
    assert as_payload(ApplicationCommand(name='ping')) == {
        'name': 'ping',
        'default_permission': True,
        'nsfw': False
    }


def test_option_omits_every_absent_field() -> None:
    option = ApplicationCommandOption(
        option_type=ApplicationCommandOptionType.STRING,
        name='query',
        description='what to search for'
    )

    assert as_payload(option) == {
        'type': 3,
        'name': 'query',
        'description': 'what to search for'
    }


def test_enums_render_as_codes() -> None:
    command = ApplicationCommand(
        name='Proxy Info',
        interaction_type=ApplicationCommandType.MESSAGE
    )

    assert as_payload(command)['type'] == 3

    option = ApplicationCommandOption(
        option_type=ApplicationCommandOptionType.CHANNEL,
        name='channel',
        description='where to post',
        channel_types=[ChannelType.GUILD_FORUM, ChannelType.GUILD_TEXT]
    )

    assert as_payload(option) == {
        'type': 7,
        'name': 'channel',
        'description': 'where to post',
        'channel_types': [15, 0]
    }


def test_false_and_empty_values_are_kept() -> None:
    option = ApplicationCommandOption(
        option_type=ApplicationCommandOptionType.STRING,
        name='query',
        description='what to search for',
        required=False,
        autocomplete=False,
        choices=[],
        min_length=0
    )

    assert as_payload(option) == {
        'type': 3,
        'name': 'query',
        'description': 'what to search for',
        'required': False,
        'choices': [],
        'min_length': 0,
        'autocomplete': False
    }


def test_full_command() -> None:
    command = ApplicationCommand(
        name='color',
        name_localizations={Locale.GERMAN: 'farbe'},
        description='pick a color',
        description_localizations={'de': 'wähle eine farbe'},
        default_member_permissions=Permission.MANAGE_ROLES,
        dm_permission=False,
        default_permission=True,
        interaction_type=ApplicationCommandType.CHAT_INPUT,
        nsfw=False
    )
    command.add_option(
        ApplicationCommandOptionType.STRING,
        'color',
        'the color',
        required=True,
        choices=[
            ApplicationCommandOptionChoice(
                name='Red', name_localizations={'de': 'Rot'}, value='red'),
            ApplicationCommandOptionChoice(name='Blue', value='blue'),
        ]
    )
    command.add_option(
        ApplicationCommandOptionType.NUMBER,
        'alpha',
        'transparency',
        min_value=0.0,
        max_value=1.0
    )

    validate(command)

    assert loads(serialize(command)) == {
        'name': 'color',
        'name_localizations': {'de': 'farbe'},
        'description': 'pick a color',
        'description_localizations': {'de': 'wähle eine farbe'},
        'options': [
            {
                'type': 3,
                'name': 'color',
                'description': 'the color',
                'required': True,
                'choices': [
                    {'name': 'Red', 'name_localizations': {'de': 'Rot'}, 'value': 'red'},
                    {'name': 'Blue', 'value': 'blue'},
                ]
            },
            {
                'type': 10,
                'name': 'alpha',
                'description': 'transparency',
                'min_value': 0.0,
                'max_value': 1.0
            }
        ],
        'default_member_permissions': '268435456',
        'dm_permission': False,
        'default_permission': True,
        'type': 1,
        'nsfw': False
    }


def test_choice_values_keep_their_json_type() -> None:
    rendered = serialize_many([ApplicationCommand(
        name='roll',
        description='roll dice',
        options=[
            ApplicationCommandOption(
                option_type=ApplicationCommandOptionType.INTEGER,
                name='sides',
                description='sides per die',
                choices=[ApplicationCommandOptionChoice(name='d6', value=6)]
            ),
            ApplicationCommandOption(
                option_type=ApplicationCommandOptionType.NUMBER,
                name='scale',
                description='scale result',
                choices=[ApplicationCommandOptionChoice(name='half', value=0.5)]
            ),
        ]
    )])

    assert '"value":6}' in rendered
    assert '"value":0.5}' in rendered


def test_nested_options_keep_order() -> None:
    command = ApplicationCommand(name='member', description='manage members')
    group = command.create_subgroup('proxy', 'manage proxy tags')
    group.add_subcommand('add', 'add a proxy tag')
    group.add_subcommand('remove', 'remove a proxy tag')
    command.add_subcommand('list', 'list members')

    payload = as_payload(command)

    assert [option['name'] for option in payload['options']] == ['proxy', 'list']
    assert [option['type'] for option in payload['options']] == [2, 1]
    assert [
        option['name']
        for option in payload['options'][0]['options']
    ] == ['add', 'remove']


def test_serialize_many(ping: ApplicationCommand) -> None:
    info = ApplicationCommand(
        name='Info',
        interaction_type=ApplicationCommandType.USER
    )

    assert loads(serialize_many([ping, info])) == [
        {
            'name': 'ping',
            'description': 'Replies with pong',
            'default_permission': True,
            'nsfw': False
        },
        {
            'name': 'Info',
            'default_permission': True,
            'type': 2,
            'nsfw': False
        }
    ]
    assert serialize_many([]) == '[]'


def test_serialize_does_not_validate() -> None:
    command = ApplicationCommand(name='Not A Slug', description='')

    assert loads(serialize(command))['name'] == 'Not A Slug'


def test_encoder_failure() -> None:
    command = ApplicationCommand(
        name='broken',
        description='holds an unencodable value',
        options=[ApplicationCommandOption(
            option_type=ApplicationCommandOptionType.STRING,
            name='value',
            description='value',
            choices=[ApplicationCommandOptionChoice.model_construct(
                name='object', value=object())]
        )]
    )

    with pytest.raises(SerializationError) as e:
        serialize(command)

    assert e.value.__cause__ is not None
