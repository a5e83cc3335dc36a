from __future__ import annotations

from collections.abc import Callable

import logfire
import pytest

from appcmd import (
    ApplicationCommand,
    ApplicationCommandOption,
    ApplicationCommandOptionType
)


type OptionFactory = Callable[..., ApplicationCommandOption]


@pytest.fixture(autouse=True, scope='session')
def _quiet_logfire() -> None:
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def ping() -> ApplicationCommand:
    return ApplicationCommand(
        name='ping',
        description='Replies with pong'
    )


@pytest.fixture
def make_option() -> OptionFactory:
    def factory(
        option_type: ApplicationCommandOptionType = ApplicationCommandOptionType.STRING,
        name: str = 'query',
        description: str = 'what to search for',
        **kwargs  # noqa: ANN003
    ) -> ApplicationCommandOption:
        return ApplicationCommandOption(
            option_type=option_type,
            name=name,
            description=description,
            **kwargs
        )

    return factory
