"""
Elastic Pools - Resources Layer

Pool lifecycle plus the read-only activity feeds the service keeps per pool.
"""

import logging
from typing import List

from azure.mgmt.sql.models import Sku

from ..coreutils.client import AzureClient
from .schemas import elastic_pool_payload, elastic_pool_update_payload

logger = logging.getLogger(__name__)


def create_elastic_pool(
    client: AzureClient, resource_group: str, server_name: str, name: str, region: str, sku: Sku
):
    logger.info(f"🔄 Creating elastic pool {name} ({sku.name})...")
    pool = (
        client.sql()
        .elastic_pools.begin_create_or_update(
            resource_group, server_name, name, elastic_pool_payload(region, sku)
        )
        .result()
    )
    logger.info(f"✅ Created elastic pool with name {pool.name}")
    return pool


def get_elastic_pool(client: AzureClient, resource_group: str, server_name: str, name: str):
    return client.sql().elastic_pools.get(resource_group, server_name, name)


def list_elastic_pools(client: AzureClient, resource_group: str, server_name: str) -> List:
    return list(client.sql().elastic_pools.list_by_server(resource_group, server_name))


def update_elastic_pool(client: AzureClient, resource_group: str, server_name: str, name: str):
    """Apply the DTU change (capacity and per-database bounds) to a pool"""
    logger.info(f"🔄 Changing DTUs in elastic pool {name}...")
    pool = (
        client.sql()
        .elastic_pools.begin_update(
            resource_group, server_name, name, elastic_pool_update_payload()
        )
        .result()
    )
    logger.info(f"✅ Changed DTUs in elastic pool {pool.name}")
    return pool


def list_pool_activities(
    client: AzureClient, resource_group: str, server_name: str, name: str
) -> List:
    return list(
        client.sql().elastic_pool_activities.list_by_elastic_pool(
            resource_group, server_name, name
        )
    )


def list_pool_database_activities(
    client: AzureClient, resource_group: str, server_name: str, name: str
) -> List:
    return list(
        client.sql().elastic_pool_database_activities.list_by_elastic_pool(
            resource_group, server_name, name
        )
    )


def delete_elastic_pool(client: AzureClient, resource_group: str, server_name: str, name: str):
    """Look the pool up by name and delete it"""
    pool = get_elastic_pool(client, resource_group, server_name, name)
    logger.info(f"🔄 Deleting elastic pool {pool.name}...")
    client.sql().elastic_pools.begin_delete(resource_group, server_name, pool.name).result()
    logger.info(f"✅ Deleted elastic pool {pool.name}")
