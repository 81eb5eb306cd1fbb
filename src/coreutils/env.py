from dataclasses import dataclass
from dotenv import load_dotenv
import os

load_dotenv()  # take environment variables from .env

REQUIRED_CREDENTIAL_KEYS = ("CLIENT_ID", "CLIENT_SECRET", "TENANT_ID")
DEFAULT_REGION = "eastus"


class MissingCredentialsError(ValueError):
    """Raised when a required credential variable is not set"""


@dataclass(frozen=True)
class AzureCredentials:
    client_id: str
    client_secret: str
    tenant_id: str
    subscription_id: str | None = None

    def __repr__(self) -> str:
        # Never print the secret
        return (
            f"AzureCredentials(client_id={self.client_id!r}, tenant_id={self.tenant_id!r}, "
            f"subscription_id={self.subscription_id!r})"
        )


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def load_credentials() -> AzureCredentials:
    """
    Read service principal credentials from the environment

    SUBSCRIPTION_ID is optional; without it the client falls back to the
    first subscription visible to the credential.

    Raises:
        MissingCredentialsError: If CLIENT_ID, CLIENT_SECRET or TENANT_ID is unset
    """
    missing = [key for key in REQUIRED_CREDENTIAL_KEYS if not env_get(key)]
    if missing:
        raise MissingCredentialsError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    return AzureCredentials(
        client_id=env_get("CLIENT_ID"),
        client_secret=env_get("CLIENT_SECRET"),
        tenant_id=env_get("TENANT_ID"),
        subscription_id=env_get("SUBSCRIPTION_ID") or None,
    )


def resolve_region(cli_region: str | None = None) -> str:
    """CLI flag wins over SAMPLE_REGION, which wins over the default."""
    return cli_region or env_get("SAMPLE_REGION") or DEFAULT_REGION
