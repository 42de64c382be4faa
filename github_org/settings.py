"""Client settings assembled from config, credentials file and environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .auth import CredentialProvider, JsonCredentialProvider
from .config import ConfigLoader
from .errors import ConfigurationError


@dataclass
class OrganizationConfig:
    name: str
    token: str


@dataclass
class ClientSettings:
    config_loader: ConfigLoader
    organization: OrganizationConfig

    @property
    def base_url(self) -> str:
        return self.config_loader.get("api.base_url")


def load_client_settings(
    organization: Optional[str] = None,
    config_file: str = "configs/config.json",
    credentials_file: Optional[str] = None,
    token: Optional[str] = None,
    environment: Optional[str] = None,
    credential_provider: Optional[CredentialProvider] = None,
) -> ClientSettings:
    """
    Load client settings. Explicit arguments win over env vars, env vars over the credentials file.

    ``credential_provider`` replaces the JSON credentials file as the token source.
    """

    config_loader = ConfigLoader(config_file=config_file, environment=environment)

    org_name = organization or os.getenv("GITHUB_ORGANIZATION", "")
    if not org_name:
        raise ConfigurationError("organization is required via argument or GITHUB_ORGANIZATION env var")

    file_token = ""
    if credential_provider is None and credentials_file:
        credential_provider = JsonCredentialProvider(credentials_file)
    if credential_provider is not None:
        try:
            credentials = credential_provider.get_organization_credentials(org_name)
        except (FileNotFoundError, ValueError) as exc:
            raise ConfigurationError(str(exc)) from exc
        file_token = credentials.get("token", "")

    api_token = token or os.getenv("GITHUB_TOKEN", "") or file_token
    if not api_token:
        raise ConfigurationError("token is required via argument, GITHUB_TOKEN env var or credentials file")

    return ClientSettings(
        config_loader=config_loader,
        organization=OrganizationConfig(name=org_name, token=api_token),
    )
