from __future__ import annotations

from enum import Enum, StrEnum, IntFlag

from .errors import UnknownCode

__all__ = (
    'AUTOCOMPLETE_OPTION_TYPES',
    'CHOICE_OPTION_TYPES',
    'CHOICE_VALUE_KINDS',
    'NUMERIC_OPTION_TYPES',
    'SUBCOMMAND_OPTION_TYPES',
    'ApplicationCommandOptionType',
    'ApplicationCommandType',
    'ChannelType',
    'ChoiceValueKind',
    'Locale',
    'Permission',
    'decode',
    'encode',
)


# ? codes are discord's wire values, never renumber an existing member


class ApplicationCommandType(Enum):
    CHAT_INPUT = 1
    """Slash commands; a text-based command that shows up when a user types /"""
    USER = 2
    """A UI-based command that shows up when you right click or tap on a user"""
    MESSAGE = 3
    """A UI-based command that shows up when you right click or tap on a message"""


class ApplicationCommandOptionType(Enum):
    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11


class ChannelType(Enum):
    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    ANNOUNCEMENT_THREAD = 10
    PUBLIC_THREAD = 11
    PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15
    GUILD_MEDIA = 16


class ChoiceValueKind(Enum):
    STRING = 'string'
    INTEGER = 'integer'
    FLOAT = 'float'


class Locale(StrEnum):
    INDONESIAN = 'id'
    DANISH = 'da'
    GERMAN = 'de'
    ENGLISH_UK = 'en-GB'
    ENGLISH_US = 'en-US'
    SPANISH = 'es-ES'
    SPANISH_LATAM = 'es-419'
    FRENCH = 'fr'
    CROATIAN = 'hr'
    ITALIAN = 'it'
    LITHUANIAN = 'lt'
    HUNGARIAN = 'hu'
    DUTCH = 'nl'
    NORWEGIAN = 'no'
    POLISH = 'pl'
    PORTUGUESE_BRAZILIAN = 'pt-BR'
    ROMANIAN = 'ro'
    FINNISH = 'fi'
    SWEDISH = 'sv-SE'
    VIETNAMESE = 'vi'
    TURKISH = 'tr'
    CZECH = 'cs'
    GREEK = 'el'
    BULGARIAN = 'bg'
    RUSSIAN = 'ru'
    UKRAINIAN = 'uk'
    HINDI = 'hi'
    THAI = 'th'
    CHINESE_CHINA = 'zh-CN'
    JAPANESE = 'ja'
    CHINESE_TAIWAN = 'zh-TW'
    KOREAN = 'ko'


class Permission(IntFlag):
    NONE = 0
    CREATE_INSTANT_INVITE = 1 << 0
    KICK_MEMBERS = 1 << 1
    BAN_MEMBERS = 1 << 2
    ADMINISTRATOR = 1 << 3
    MANAGE_CHANNELS = 1 << 4
    MANAGE_GUILD = 1 << 5
    ADD_REACTIONS = 1 << 6
    VIEW_AUDIT_LOG = 1 << 7
    PRIORITY_SPEAKER = 1 << 8
    STREAM = 1 << 9
    VIEW_CHANNEL = 1 << 10
    SEND_MESSAGES = 1 << 11
    SEND_TTS_MESSAGES = 1 << 12
    MANAGE_MESSAGES = 1 << 13
    EMBED_LINKS = 1 << 14
    ATTACH_FILES = 1 << 15
    READ_MESSAGE_HISTORY = 1 << 16
    MENTION_EVERYONE = 1 << 17
    USE_EXTERNAL_EMOJIS = 1 << 18
    VIEW_GUILD_INSIGHTS = 1 << 19
    CONNECT = 1 << 20
    SPEAK = 1 << 21
    MUTE_MEMBERS = 1 << 22
    DEAFEN_MEMBERS = 1 << 23
    MOVE_MEMBERS = 1 << 24
    USE_VAD = 1 << 25
    CHANGE_NICKNAME = 1 << 26
    MANAGE_NICKNAMES = 1 << 27
    MANAGE_ROLES = 1 << 28
    MANAGE_WEBHOOKS = 1 << 29
    MANAGE_GUILD_EXPRESSIONS = 1 << 30
    USE_APPLICATION_COMMANDS = 1 << 31
    REQUEST_TO_SPEAK = 1 << 32
    MANAGE_EVENTS = 1 << 33
    MANAGE_THREADS = 1 << 34
    CREATE_PUBLIC_THREADS = 1 << 35
    CREATE_PRIVATE_THREADS = 1 << 36
    USE_EXTERNAL_STICKERS = 1 << 37
    SEND_MESSAGES_IN_THREADS = 1 << 38
    USE_EMBEDDED_ACTIVITIES = 1 << 39
    MODERATE_MEMBERS = 1 << 40
    VIEW_CREATOR_MONETIZATION_ANALYTICS = 1 << 41
    USE_SOUNDBOARD = 1 << 42
    CREATE_GUILD_EXPRESSIONS = 1 << 43
    CREATE_EVENTS = 1 << 44
    USE_EXTERNAL_SOUNDS = 1 << 45
    SEND_VOICE_MESSAGES = 1 << 46
    SEND_POLLS = 1 << 49
    USE_EXTERNAL_APPS = 1 << 50


CHOICE_OPTION_TYPES = frozenset({
    ApplicationCommandOptionType.STRING,
    ApplicationCommandOptionType.INTEGER,
    ApplicationCommandOptionType.NUMBER,
})

AUTOCOMPLETE_OPTION_TYPES = CHOICE_OPTION_TYPES

NUMERIC_OPTION_TYPES = frozenset({
    ApplicationCommandOptionType.INTEGER,
    ApplicationCommandOptionType.NUMBER,
})

SUBCOMMAND_OPTION_TYPES = frozenset({
    ApplicationCommandOptionType.SUB_COMMAND,
    ApplicationCommandOptionType.SUB_COMMAND_GROUP,
})

CHOICE_VALUE_KINDS: dict[ApplicationCommandOptionType, ChoiceValueKind] = {
    ApplicationCommandOptionType.STRING: ChoiceValueKind.STRING,
    ApplicationCommandOptionType.INTEGER: ChoiceValueKind.INTEGER,
    ApplicationCommandOptionType.NUMBER: ChoiceValueKind.FLOAT,
}


def encode(
    variant: ApplicationCommandType | ApplicationCommandOptionType | ChannelType
) -> int:
    return variant.value


def decode[E: Enum](
    enum: type[E],
    code: int
) -> E:
    try:
        return enum(code)
    except ValueError as e:
        raise UnknownCode(enum.__name__, code) from e
