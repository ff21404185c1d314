"""Token providers supplying the bearer credential for signup requests."""

from __future__ import annotations

import os
from typing import Protocol

from loguru import logger

from ..config import SignupConfig
from ..exceptions import TokenUnavailableError
from .store import TokenStore

TOKEN_ENV_VAR = "SIGNUP_CLIENT_TOKEN"


class TokenProvider(Protocol):
    """Anything that can hand out the bearer token on demand."""

    def get_token(self) -> str: ...


class StaticTokenProvider:
    """Provider returning a fixed token."""

    def __init__(self, token: str):
        if not token:
            raise TokenUnavailableError("Static token must not be empty")
        self._token = token

    def get_token(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return "StaticTokenProvider(token='***')"


class EnvTokenProvider:
    """Provider reading the token from an environment variable at call time."""

    def __init__(self, variable: str = TOKEN_ENV_VAR):
        self.variable = variable

    def get_token(self) -> str:
        token = os.getenv(self.variable)
        if not token:
            raise TokenUnavailableError(f"Environment variable {self.variable} is not set")
        return token


class FileTokenProvider:
    """Provider reading the token from a TokenStore."""

    def __init__(self, store: TokenStore):
        self.store = store

    def get_token(self) -> str:
        token = self.store.load_token()
        if token is None:
            raise TokenUnavailableError(f"No usable token in {self.store.token_file}")
        return token


def resolve_token_provider(config: SignupConfig) -> TokenProvider:
    """Pick a token provider for the configuration.

    An explicit token wins, then an existing token file, then the
    environment variable (read lazily on each request).
    """
    if config.token:
        logger.debug("Using configured token")
        return StaticTokenProvider(config.token)

    store = TokenStore(config.token_file)
    if store.token_file.exists():
        logger.debug(f"Using token file: {store.token_file}")
        return FileTokenProvider(store)

    logger.debug(f"Using token from environment variable {TOKEN_ENV_VAR}")
    return EnvTokenProvider()
