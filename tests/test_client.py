import os
import sys
from types import SimpleNamespace

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from unittest.mock import MagicMock, Mock, patch

from src.coreutils.client import AzureClient
from src.coreutils.env import AzureCredentials


class TestAzureClient(unittest.TestCase):
    def test_configured_subscription_is_the_default(self):
        subscription_factory = Mock()
        client = AzureClient(
            Mock(), subscription_id="sub-1", subscription_client_factory=subscription_factory
        )

        self.assertEqual(client.get_default_subscription(), "sub-1")
        subscription_factory.assert_not_called()

    def test_default_subscription_is_looked_up_when_unset(self):
        subscription_client = MagicMock()
        subscription_client.subscriptions.list.return_value = iter(
            [
                SimpleNamespace(subscription_id="sub-a", display_name="First"),
                SimpleNamespace(subscription_id="sub-b", display_name="Second"),
            ]
        )
        client = AzureClient(
            Mock(), subscription_client_factory=Mock(return_value=subscription_client)
        )

        self.assertEqual(client.get_default_subscription(), "sub-a")
        # Cached after the first lookup
        self.assertEqual(client.get_default_subscription(), "sub-a")
        subscription_client.subscriptions.list.assert_called_once()

    def test_no_visible_subscription_raises(self):
        subscription_client = MagicMock()
        subscription_client.subscriptions.list.return_value = iter([])
        client = AzureClient(
            Mock(), subscription_client_factory=Mock(return_value=subscription_client)
        )

        with self.assertRaises(LookupError):
            client.get_default_subscription()

    def test_management_clients_are_cached_per_subscription(self):
        credential = Mock()
        sql_factory = Mock(side_effect=lambda cred, sub: Mock(name=f"sql-{sub}"))
        resource_factory = Mock(side_effect=lambda cred, sub: Mock(name=f"rm-{sub}"))
        client = AzureClient(
            credential,
            subscription_id="sub-1",
            sql_client_factory=sql_factory,
            resource_client_factory=resource_factory,
        )

        self.assertIs(client.sql(), client.sql())
        self.assertIs(client.resources(), client.resources("sub-1"))
        self.assertIsNot(client.sql("sub-2"), client.sql())
        sql_factory.assert_any_call(credential, "sub-1")
        sql_factory.assert_any_call(credential, "sub-2")
        self.assertEqual(sql_factory.call_count, 2)
        resource_factory.assert_called_once_with(credential, "sub-1")

    @patch("src.coreutils.client.ClientSecretCredential")
    def test_from_credentials_builds_service_principal_credential(self, mock_credential):
        creds = AzureCredentials(
            client_id="cid", client_secret="secret", tenant_id="tid", subscription_id="sub-9"
        )

        client = AzureClient.from_credentials(creds)

        mock_credential.assert_called_once_with(
            tenant_id="tid", client_id="cid", client_secret="secret"
        )
        self.assertIs(client.credential, mock_credential.return_value)
        self.assertEqual(client.subscription_id, "sub-9")


if __name__ == "__main__":
    unittest.main()
