from typing import Protocol, Dict, Any
import json
import os


class CredentialProvider(Protocol):
    """Abstraction for fetching organization credentials."""

    def get_organization_credentials(self, organization: str) -> Dict[str, Any]:
        ...


class JsonCredentialProvider:
    """
    Credential provider that reads organization tokens from a JSON file
    like configs/credential.json:

        {"organizations": [{"name": "my-org", "token": "ghp_..."}]}
    """

    def __init__(self, credentials_file: str = "configs/credential.json"):
        self.credentials_file = credentials_file

    def get_organization_credentials(self, organization: str) -> Dict[str, Any]:
        if not os.path.exists(self.credentials_file):
            raise FileNotFoundError(f"Credentials file not found: {self.credentials_file}")

        with open(self.credentials_file, "r", encoding="utf-8") as f:
            data = json.load(f)

        for org in data.get("organizations", []):
            if org.get("name") == organization:
                return org

        raise ValueError(f"Organization {organization} not found in {self.credentials_file}")
