from __future__ import annotations

from copy import deepcopy

import pydantic
import pytest

from appcmd import (
    MISSING,
    ApplicationCommand,
    ApplicationCommandOption,
    ApplicationCommandOptionChoice,
    ApplicationCommandOptionType,
    ApplicationCommandType,
    ChannelType,
    ChoiceValueKind,
    Permission,
    is_not_missing
)


def test_optional_fields_default_to_missing(ping: ApplicationCommand) -> None:
    assert ping.options is MISSING
    assert ping.interaction_type is MISSING
    assert ping.dm_permission is MISSING
    assert ping.default_permission is True
    assert ping.nsfw is False
    assert ping.is_chat_input


def test_missing_is_falsy_and_survives_copies() -> None:
    assert not MISSING
    assert repr(MISSING) == 'MISSING'
    assert deepcopy(MISSING) is MISSING
    assert not is_not_missing(MISSING)
    assert is_not_missing(None)
    assert is_not_missing(0)


def test_structural_equality(ping: ApplicationCommand) -> None:
    assert ping == ApplicationCommand(name='ping', description='Replies with pong')
    assert ping != ApplicationCommand(name='ping', description='Replies with ping')


def test_explicit_chat_input_type() -> None:
    command = ApplicationCommand(
        name='ping',
        description='Replies with pong',
        interaction_type=ApplicationCommandType.CHAT_INPUT
    )

    assert command.is_chat_input


def test_message_command_is_not_chat_input() -> None:
    command = ApplicationCommand(
        name='Proxy Info',
        interaction_type=ApplicationCommandType.MESSAGE
    )

    assert not command.is_chat_input
    assert command.description is MISSING


@pytest.mark.parametrize(('value', 'kind'), [
    ('red', ChoiceValueKind.STRING),
    (3, ChoiceValueKind.INTEGER),
    (3.14, ChoiceValueKind.FLOAT),
])
def test_choice_kind(value: object, kind: ChoiceValueKind) -> None:
    choice = ApplicationCommandOptionChoice(name='choice', value=value)

    assert choice.kind is kind
    assert choice.value == value


def test_choice_value_keeps_integer_and_float_apart() -> None:
    assert type(ApplicationCommandOptionChoice(name='a', value=1).value) is int
    assert type(ApplicationCommandOptionChoice(name='a', value=1.0).value) is float


def test_choice_rejects_boolean_value() -> None:
    with pytest.raises(pydantic.ValidationError):
        ApplicationCommandOptionChoice(name='yes', value=True)


def test_channel_types_accept_codes() -> None:
    option = ApplicationCommandOption(
        option_type=ApplicationCommandOptionType.CHANNEL,
        name='channel',
        description='where to post',
        channel_types=[0, ChannelType.GUILD_FORUM]
    )

    assert option.channel_types == [ChannelType.GUILD_TEXT, ChannelType.GUILD_FORUM]


def test_permission_bitfield_is_stored_as_string() -> None:
    command = ApplicationCommand(
        name='ban',
        description='ban a member',
        default_member_permissions=Permission.BAN_MEMBERS | Permission.KICK_MEMBERS
    )

    assert command.default_member_permissions == '6'

    assert ApplicationCommand(
        name='ban',
        description='ban a member',
        default_member_permissions=8
    ).default_member_permissions == '8'


def test_create_subgroup_and_subcommands() -> None:
    command = ApplicationCommand(name='member', description='manage members')

    group = command.create_subgroup('proxy', 'manage proxy tags')
    subcommand = group.add_subcommand('add', 'add a proxy tag')
    parameter = subcommand.add_option(
        ApplicationCommandOptionType.STRING,
        'prefix',
        'text before the message',
        required=True
    )

    assert command.options == [group]
    assert group.option_type is ApplicationCommandOptionType.SUB_COMMAND_GROUP
    assert group.options == [subcommand]
    assert subcommand.option_type is ApplicationCommandOptionType.SUB_COMMAND
    assert subcommand.options == [parameter]
    assert parameter.required is True


def test_add_subcommand_without_options() -> None:
    command = ApplicationCommand(name='config', description='bot config')

    subcommand = command.add_subcommand('show', 'show the config')

    assert subcommand.options is MISSING
    assert command.options == [subcommand]
