from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr, field_validator

from .missing import MISSING, Optional
from .enums import (
    ApplicationCommandOptionType,
    ApplicationCommandType,
    ChannelType,
    ChoiceValueKind
)


__all__ = (
    'ApplicationCommand',
    'ApplicationCommandOption',
    'ApplicationCommandOptionChoice',
    'ChoiceValue',
)


type ChoiceValue = StrictStr | StrictInt | StrictFloat


class ApplicationCommandOptionChoice(BaseModel):
    name: str
    """1-100 character choice name"""
    name_localizations: Optional[dict[str, str]] = MISSING
    """Localization dictionary for the `name` field"""
    value: ChoiceValue
    """Value for the choice, up to 100 characters if string"""

    @property
    def kind(self) -> ChoiceValueKind:
        match self.value:
            case str():
                return ChoiceValueKind.STRING
            case int():
                return ChoiceValueKind.INTEGER
            case float():
                return ChoiceValueKind.FLOAT

        raise TypeError(f'unexpected choice value {self.value!r}')


class OptionContainerMixin:
    if TYPE_CHECKING:
        options: Optional[list[ApplicationCommandOption]]

    def add_option(
        self,
        type: ApplicationCommandOptionType,
        name: str,
        description: str,
        **kwargs  # noqa: ANN003
    ) -> ApplicationCommandOption:
        option = ApplicationCommandOption(
            option_type=type,
            name=name,
            description=description,
            **kwargs
        )

        self.options = self.options or []
        self.options.append(option)

        return option

    def add_subcommand(
        self,
        name: str,
        description: str,
        options: Optional[list[ApplicationCommandOption]] = MISSING,
        **kwargs  # noqa: ANN003
    ) -> ApplicationCommandOption:
        return self.add_option(
            ApplicationCommandOptionType.SUB_COMMAND,
            name,
            description,
            options=options,
            **kwargs
        )


class ApplicationCommandOption(BaseModel, OptionContainerMixin):
    option_type: ApplicationCommandOptionType
    """Type of option"""
    name: str
    """1-32 character name"""
    name_localizations: Optional[dict[str, str]] = MISSING
    """Localization dictionary for the `name` field"""
    description: str
    """1-100 character description"""
    description_localizations: Optional[dict[str, str]] = MISSING
    """Localization dictionary for the `description` field"""
    required: Optional[bool] = MISSING
    """Whether the parameter is required, discord defaults to `false`"""
    choices: Optional[list[ApplicationCommandOptionChoice]] = MISSING
    """Choices for STRING, INTEGER and NUMBER options, max 25"""
    options: Optional[list[ApplicationCommandOption]] = MISSING
    """Parameters of a subcommand, or subcommands of a subcommand group"""
    channel_types: Optional[list[ChannelType]] = MISSING
    """The channels shown will be restricted to these types"""
    min_value: Optional[StrictInt | StrictFloat] = MISSING
    """Minimum value permitted for INTEGER and NUMBER options"""
    max_value: Optional[StrictInt | StrictFloat] = MISSING
    """Maximum value permitted for INTEGER and NUMBER options"""
    min_length: Optional[int] = MISSING
    """Minimum allowed length for STRING options (0-6000)"""
    max_length: Optional[int] = MISSING
    """Maximum allowed length for STRING options (1-6000)"""
    autocomplete: Optional[bool] = MISSING
    """Whether autocomplete interactions are enabled for this option"""


class ApplicationCommand(BaseModel, OptionContainerMixin):
    name: str
    """1-32 character name"""
    name_localizations: Optional[dict[str, str]] = MISSING
    """Localization dictionary for the `name` field"""
    description: Optional[str] = MISSING
    """1-100 character description for CHAT_INPUT commands, absent for USER and MESSAGE"""
    description_localizations: Optional[dict[str, str]] = MISSING
    """Localization dictionary for the `description` field"""
    options: Optional[list[ApplicationCommandOption]] = MISSING
    """Parameters for the command, max of 25"""
    default_member_permissions: Optional[str] = MISSING
    """Set of permissions represented as a bit set, as a decimal string"""
    dm_permission: Optional[bool] = MISSING  # deprecated
    default_permission: bool = True  # deprecated
    interaction_type: Optional[ApplicationCommandType] = MISSING
    """Type of command, discord defaults to CHAT_INPUT"""
    nsfw: bool = False
    """Whether the command is age-restricted"""

    @field_validator('default_member_permissions', mode='before')
    @classmethod
    def _permission_bitfield(cls, value: object) -> object:
        if isinstance(value, bool):
            return value

        if isinstance(value, int):
            return str(int(value))

        return value

    @property
    def is_chat_input(self) -> bool:
        return self.interaction_type in {
            MISSING, ApplicationCommandType.CHAT_INPUT}

    def create_subgroup(
        self,
        name: str,
        description: str,
    ) -> ApplicationCommandOption:
        return self.add_option(
            ApplicationCommandOptionType.SUB_COMMAND_GROUP,
            name,
            description
        )

    def validate(self) -> None:  # type: ignore[override]
        from .validator import validate
        validate(self)

    def as_payload(self) -> dict:
        from .serializer import as_payload
        return as_payload(self)

    def to_json(self) -> str:
        from .serializer import serialize
        return serialize(self)


ApplicationCommandOption.model_rebuild()
ApplicationCommand.model_rebuild()
