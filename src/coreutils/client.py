"""
Azure client handle

Bundles a credential with the subscription it operates on and hands out the
management clients the sample needs. Clients are built lazily and cached per
subscription.
"""

import logging
from typing import Callable, Optional

from azure.identity import ClientSecretCredential
from azure.mgmt.resource import ResourceManagementClient, SubscriptionClient
from azure.mgmt.sql import SqlManagementClient

from .env import AzureCredentials

logger = logging.getLogger(__name__)


class AzureClient:
    """Authenticated entry point to the Azure management plane"""

    def __init__(
        self,
        credential,
        subscription_id: Optional[str] = None,
        resource_client_factory: Callable = ResourceManagementClient,
        sql_client_factory: Callable = SqlManagementClient,
        subscription_client_factory: Callable = SubscriptionClient,
    ):
        """
        Args:
            credential: Any azure-identity TokenCredential
            subscription_id: Default subscription; looked up on first use if None
            resource_client_factory: Builds a resource client from (credential, subscription_id)
            sql_client_factory: Builds a SQL client from (credential, subscription_id)
            subscription_client_factory: Builds a subscription client from (credential)
        """
        self.credential = credential
        self.subscription_id = subscription_id
        self._resource_client_factory = resource_client_factory
        self._sql_client_factory = sql_client_factory
        self._subscription_client_factory = subscription_client_factory
        self._resource_clients = {}
        self._sql_clients = {}

    @classmethod
    def from_credentials(cls, creds: AzureCredentials) -> "AzureClient":
        credential = ClientSecretCredential(
            tenant_id=creds.tenant_id,
            client_id=creds.client_id,
            client_secret=creds.client_secret,
        )
        return cls(credential, subscription_id=creds.subscription_id)

    def get_default_subscription(self) -> str:
        """
        Return the default subscription id

        Uses the configured subscription when there is one, otherwise the first
        subscription the credential can see.

        Raises:
            LookupError: If the credential has access to no subscription
        """
        if self.subscription_id:
            return self.subscription_id

        logger.info("🔄 No subscription configured, looking up the default one...")
        subscription_client = self._subscription_client_factory(self.credential)
        for subscription in subscription_client.subscriptions.list():
            self.subscription_id = subscription.subscription_id
            logger.info(
                f"✅ Using subscription {subscription.display_name} ({self.subscription_id})"
            )
            return self.subscription_id

        raise LookupError("No subscription is accessible with the given credential")

    def resources(self, subscription_id: Optional[str] = None):
        """ResourceManagementClient for the given (or default) subscription"""
        subscription_id = subscription_id or self.get_default_subscription()
        if subscription_id not in self._resource_clients:
            self._resource_clients[subscription_id] = self._resource_client_factory(
                self.credential, subscription_id
            )
        return self._resource_clients[subscription_id]

    def sql(self, subscription_id: Optional[str] = None):
        """SqlManagementClient for the given (or default) subscription"""
        subscription_id = subscription_id or self.get_default_subscription()
        if subscription_id not in self._sql_clients:
            self._sql_clients[subscription_id] = self._sql_client_factory(
                self.credential, subscription_id
            )
        return self._sql_clients[subscription_id]
