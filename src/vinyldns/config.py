"""Client options loaded from the environment."""

import os
from typing import Mapping, Optional

from .errors import ValidationError
from .types.common import ClientOptionsType

ENV_HOST = 'VINYLDNS_HOST'
ENV_API_KEY = 'VINYLDNS_API_KEY'
ENV_TIMEOUT = 'VINYLDNS_TIMEOUT'
ENV_USER_AGENT = 'VINYLDNS_USER_AGENT'


def options_from_env(environ: Optional[Mapping[str, str]] = None) -> ClientOptionsType:
    """Build client options from VINYLDNS_* environment variables.

    Unset variables are left out so the client defaults apply.

    Args:
        environ: Mapping to read instead of os.environ

    Raises:
        ValidationError: If VINYLDNS_TIMEOUT is not a number
    """
    if environ is None:
        environ = os.environ

    opts: ClientOptionsType = {}
    if environ.get(ENV_HOST):
        opts['baseUrl'] = environ[ENV_HOST]
    if environ.get(ENV_API_KEY):
        opts['apiKey'] = environ[ENV_API_KEY]
    if environ.get(ENV_USER_AGENT):
        opts['userAgent'] = environ[ENV_USER_AGENT]
    if environ.get(ENV_TIMEOUT):
        try:
            opts['timeout'] = float(environ[ENV_TIMEOUT])
        except ValueError as e:
            raise ValidationError(f'{ENV_TIMEOUT} must be a number; got {environ[ENV_TIMEOUT]!r}') from e
    return opts
