"""
SQL Servers - Resources Layer

Server and firewall rule operations.
"""

import logging

from ..coreutils.client import AzureClient
from .schemas import firewall_rule_payload, server_payload

logger = logging.getLogger(__name__)


def create_server(
    client: AzureClient,
    resource_group: str,
    name: str,
    region: str,
    admin_login: str,
    admin_password: str,
):
    logger.info(f"🔄 Creating SQL Server {name}...")
    server = (
        client.sql()
        .servers.begin_create_or_update(
            resource_group, name, server_payload(region, admin_login, admin_password)
        )
        .result()
    )
    logger.info(f"✅ Created a SQL Server with name: {server.name}")
    return server


def create_firewall_rule(
    client: AzureClient,
    resource_group: str,
    server_name: str,
    name: str,
    start_ip: str,
    end_ip: str,
):
    rule = client.sql().firewall_rules.create_or_update(
        resource_group, server_name, name, firewall_rule_payload(start_ip, end_ip)
    )
    logger.info(
        f"✅ Created firewall rule {rule.name} ({rule.start_ip_address} - {rule.end_ip_address})"
    )
    return rule


def delete_server(client: AzureClient, resource_group: str, name: str):
    logger.info(f"🔄 Deleting SQL Server {name}...")
    client.sql().servers.begin_delete(resource_group, name).result()
    logger.info(f"✅ Deleted SQL Server {name}")
