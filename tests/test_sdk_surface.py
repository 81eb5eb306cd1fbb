"""
Checks that the installed Azure SDK exposes every operation group the
resources layer calls, so the in-memory fakes cannot drift from it.
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest

from azure.mgmt.resource import ResourceManagementClient, SubscriptionClient
from azure.mgmt.sql import SqlManagementClient

from tests.fakes import FakeResourceManagementClient, FakeSqlManagementClient

SQL_OPERATION_GROUPS = (
    "servers",
    "firewall_rules",
    "elastic_pools",
    "databases",
    "elastic_pool_activities",
    "elastic_pool_database_activities",
)


class TestSdkSurface(unittest.TestCase):
    def test_sql_client_has_every_operation_group(self):
        client = SqlManagementClient(object(), "sub")

        for group in SQL_OPERATION_GROUPS:
            with self.subTest(group=group):
                self.assertTrue(hasattr(client, group), f"SqlManagementClient has no {group}")

    def test_sql_fake_mirrors_the_real_client(self):
        fake = FakeSqlManagementClient()

        for group in SQL_OPERATION_GROUPS:
            with self.subTest(group=group):
                self.assertTrue(hasattr(fake, group))

    def test_activity_groups_list_by_elastic_pool(self):
        client = SqlManagementClient(object(), "sub")

        self.assertTrue(hasattr(client.elastic_pool_activities, "list_by_elastic_pool"))
        self.assertTrue(
            hasattr(client.elastic_pool_database_activities, "list_by_elastic_pool")
        )

    def test_resource_clients_have_used_operation_groups(self):
        resources = ResourceManagementClient(object(), "sub")
        subscriptions = SubscriptionClient(object())

        self.assertTrue(hasattr(resources, "resource_groups"))
        self.assertTrue(hasattr(subscriptions, "subscriptions"))
        self.assertTrue(hasattr(FakeResourceManagementClient(), "resource_groups"))


if __name__ == "__main__":
    unittest.main()
