from .missing import MISSING, is_not_missing
from .enums import (
    ApplicationCommandOptionType,
    ApplicationCommandType,
    ChannelType,
    ChoiceValueKind,
    Locale,
    Permission,
    decode,
    encode
)
from .errors import (
    AppCommandException,
    ChoiceValueTypeMismatch,
    FieldNotApplicableForType,
    IllegalNesting,
    InvalidLocale,
    InvalidName,
    LengthOutOfRange,
    MutuallyExclusiveFields,
    NumericRangeInverted,
    RequiredOptionOrder,
    SerializationError,
    TooManyChoices,
    TooManyOptions,
    UnknownCode,
    ValidationError,
    ValueOutOfRange
)
from .models import (
    ApplicationCommand,
    ApplicationCommandOption,
    ApplicationCommandOptionChoice,
    ChoiceValue
)
from .validator import validate, validate_choice, validate_option
from .serializer import as_payload, serialize, serialize_many
from .sync import SyncStep, diff_commands, plan_sync
from .log import configure_logging
from .version import VERSION

__version__ = VERSION

__all__ = (
    'MISSING',
    'VERSION',
    'AppCommandException',
    'ApplicationCommand',
    'ApplicationCommandOption',
    'ApplicationCommandOptionChoice',
    'ApplicationCommandOptionType',
    'ApplicationCommandType',
    'ChannelType',
    'ChoiceValue',
    'ChoiceValueKind',
    'ChoiceValueTypeMismatch',
    'FieldNotApplicableForType',
    'IllegalNesting',
    'InvalidLocale',
    'InvalidName',
    'LengthOutOfRange',
    'Locale',
    'MutuallyExclusiveFields',
    'NumericRangeInverted',
    'Permission',
    'RequiredOptionOrder',
    'SerializationError',
    'SyncStep',
    'TooManyChoices',
    'TooManyOptions',
    'UnknownCode',
    'ValidationError',
    'ValueOutOfRange',
    'as_payload',
    'configure_logging',
    'decode',
    'diff_commands',
    'encode',
    'is_not_missing',
    'plan_sync',
    'serialize',
    'serialize_many',
    'validate',
    'validate_choice',
    'validate_option',
)
