"""
Client configuration

Values come from the environment so deployments can keep sender and
company credentials out of code:

- INTACCT_SENDER_ID / INTACCT_SENDER_PASSWORD: Web Services sender (required)
- INTACCT_ENDPOINT_URL: XML gateway URL
- INTACCT_TIMEOUT_SECS: HTTP timeout
- INTACCT_DTD_VERSION: request DTD version
- INTACCT_COMPANY_ID / INTACCT_USER_ID / INTACCT_USER_PASSWORD / INTACCT_ENTITY_ID:
  company login used by credentials_from_env()
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from intacct.core.session import DEFAULT_ENDPOINT_URL, IntacctUserCredentials
from intacct.services.errors import ConfigError

DEFAULT_TIMEOUT_SECS = 30.0
DEFAULT_DTD_VERSION = "2.1"


@dataclass(frozen=True)
class IntacctClientConfig:
    sender_id: str
    sender_password: str = field(repr=False)
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    timeout: float = DEFAULT_TIMEOUT_SECS
    dtd_version: str = DEFAULT_DTD_VERSION

    def __post_init__(self):
        if not self.sender_id:
            raise ConfigError("sender_id", "Sender id is required")
        if not self.sender_password:
            raise ConfigError("sender_password", "Sender password is required")
        if self.timeout <= 0:
            raise ConfigError("timeout", "Timeout must be positive")

    @classmethod
    def from_env(cls) -> "IntacctClientConfig":
        raw_timeout = os.getenv("INTACCT_TIMEOUT_SECS", str(DEFAULT_TIMEOUT_SECS))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError("timeout", f"INTACCT_TIMEOUT_SECS is not a number: {raw_timeout!r}")

        return cls(
            sender_id=_required("INTACCT_SENDER_ID", "sender_id"),
            sender_password=_required("INTACCT_SENDER_PASSWORD", "sender_password"),
            endpoint_url=os.getenv("INTACCT_ENDPOINT_URL", DEFAULT_ENDPOINT_URL),
            timeout=timeout,
            dtd_version=os.getenv("INTACCT_DTD_VERSION", DEFAULT_DTD_VERSION),
        )


def credentials_from_env() -> IntacctUserCredentials:
    return IntacctUserCredentials(
        company_id=_required("INTACCT_COMPANY_ID", "company_id"),
        user_id=_required("INTACCT_USER_ID", "user_id"),
        password=_required("INTACCT_USER_PASSWORD", "password"),
        entity_id=os.getenv("INTACCT_ENTITY_ID") or None,
        endpoint_url=os.getenv("INTACCT_ENDPOINT_URL", DEFAULT_ENDPOINT_URL),
    )


def _required(env_var: str, field_name: str) -> str:
    value = os.getenv(env_var, "").strip()
    if not value:
        raise ConfigError(field_name, f"Set {env_var}")
    return value
