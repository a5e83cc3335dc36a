from typing import Self
from os import environ

from pydantic import BaseModel


__all__ = (
    'Env',
    'env',
)


class Env(BaseModel):
    dev: bool
    logfire_token: str | None
    service_name: str

    @classmethod
    def new(cls) -> Self:
        return cls.model_validate({
            'dev': environ.get('DEV', '0') != '0',
            'logfire_token': environ.get('LOGFIRE_TOKEN') or None,
            'service_name': environ.get('SERVICE_NAME', 'appcmd')
        })


env = Env.new()
