from __future__ import annotations

from typing import Literal

from pydantic import BaseModel
import logfire

from .enums import ApplicationCommandType
from .models import ApplicationCommand


__all__ = (
    'SyncStep',
    'diff_commands',
    'plan_sync',
)


class SyncStep(BaseModel):
    method: Literal['POST', 'PATCH', 'DELETE', 'PUT']
    commands: list[ApplicationCommand]
    reasons: list[str] = []


def _command_type(command: ApplicationCommand) -> ApplicationCommandType:
    return command.interaction_type or ApplicationCommandType.CHAT_INPUT


def diff_commands(
    local_command: ApplicationCommand,
    live_command: ApplicationCommand
) -> list[str]:
    """Reasons the local definition differs from the registered one."""
    reasons = []

    if _command_type(local_command) != _command_type(live_command):
        reasons.append(
            f'type ({_command_type(local_command).name} != {_command_type(live_command).name})')

    if (local_command.description or '') != (live_command.description or ''):
        reasons.append('description')

    local_options = local_command.options or []
    live_options = live_command.options or []

    if len(local_options) != len(live_options):
        reasons.append(
            f'options ({len(local_options)} != {len(live_options)})')

    for local_option, live_option in zip(local_options, live_options):
        if local_option != live_option:
            reasons.append(f'options ({local_option.name})')

    if local_command.default_member_permissions != live_command.default_member_permissions:
        reasons.append(
            f'default_member_permissions ({local_command.default_member_permissions!r} != {
                live_command.default_member_permissions!r})')

    if local_command.nsfw != live_command.nsfw:
        reasons.append(f'nsfw ({local_command.nsfw} != {live_command.nsfw})')

    for field in ('name_localizations', 'description_localizations'):
        if (getattr(local_command, field) or {}) != (getattr(live_command, field) or {}):
            reasons.append(field)

    return reasons


def plan_sync(
    local_commands: dict[str, ApplicationCommand],
    live_commands: dict[str, ApplicationCommand],
    bulk_threshold: int = 4
) -> list[SyncStep]:
    """Work out the registration requests that bring discord in line.

    Falls back to a single bulk overwrite when nothing is registered yet,
    or when there would be more than `bulk_threshold` individual requests.
    """
    if local_commands and not live_commands:
        logfire.debug('no commands found on discord, registering all')
        return [SyncStep(method='PUT', commands=list(local_commands.values()))]

    updates: list[SyncStep] = []

    for name, command in local_commands.items():
        if name not in live_commands:
            updates.append(SyncStep(method='POST', commands=[command]))
            continue

        if reasons := diff_commands(command, live_commands[name]):
            updates.append(SyncStep(
                method='PATCH',
                commands=[command],
                reasons=reasons
            ))

    for name, command in live_commands.items():
        if name not in local_commands:
            updates.append(SyncStep(method='DELETE', commands=[command]))

    if len(updates) > bulk_threshold:
        logfire.debug('too many updates, registering all')
        return [SyncStep(method='PUT', commands=list(local_commands.values()))]

    for update in updates:
        logfire.debug(
            '{method} {command_name}',
            method=update.method,
            command_name=update.commands[0].name,
            reason=', '.join(update.reasons)
        )

    return updates
