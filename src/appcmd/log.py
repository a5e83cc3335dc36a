import logfire

from .version import VERSION
from .env import Env, env as default_env


__all__ = (
    'configure_logging',
)


def configure_logging(env: Env | None = None) -> None:
    env = env or default_env

    logfire.configure(
        service_name=env.service_name + ('-dev' if env.dev else ''),
        service_version=VERSION,
        token=env.logfire_token,
        environment='development' if env.dev else 'production',
        send_to_logfire='if-token-present',
        scrubbing=False if env.dev else None,
        console=None if env.dev else False
    )
