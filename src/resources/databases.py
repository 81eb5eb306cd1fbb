"""
Databases - Resources Layer

Database lifecycle and pool membership changes.
"""

import logging
from typing import List, Optional

from azure.mgmt.sql.models import Sku

from ..coreutils.client import AzureClient
from ..coreutils.result import OperationResult, attempt
from .schemas import attach_to_pool_payload, database_payload, detach_from_pool_payload

logger = logging.getLogger(__name__)


def create_database(
    client: AzureClient,
    resource_group: str,
    server_name: str,
    name: str,
    region: str,
    elastic_pool_id: Optional[str] = None,
):
    """Create a database, inside the given pool when elastic_pool_id is set"""
    database = (
        client.sql()
        .databases.begin_create_or_update(
            resource_group, server_name, name, database_payload(region, elastic_pool_id)
        )
        .result()
    )
    logger.info(f"✅ Created database with name {database.name}")
    return database


def attach_to_pool(
    client: AzureClient, resource_group: str, server_name: str, name: str, elastic_pool_id: str
):
    logger.info(f"🔄 Moving database {name} into the elastic pool...")
    database = (
        client.sql()
        .databases.begin_update(
            resource_group, server_name, name, attach_to_pool_payload(elastic_pool_id)
        )
        .result()
    )
    logger.info(f"✅ Updated a database with name: {database.name}")
    return database


def detach_from_pool(
    client: AzureClient, resource_group: str, server_name: str, name: str, sku: Optional[Sku]
):
    """
    Remove a database from its pool

    Raises:
        ValueError: If no standalone sku is given, before any remote call
    """
    payload = detach_from_pool_payload(sku)
    logger.info(f"🔄 Removing database {name} from the pool...")
    database = (
        client.sql().databases.begin_update(resource_group, server_name, name, payload).result()
    )
    logger.info(f"✅ Removed the database from the pool with database name: {database.name}")
    return database


def list_pool_databases(
    client: AzureClient, resource_group: str, server_name: str, pool_name: str
) -> List:
    return list(
        client.sql().databases.list_by_elastic_pool(resource_group, server_name, pool_name)
    )


def list_server_databases(client: AzureClient, resource_group: str, server_name: str) -> List:
    return list(client.sql().databases.list_by_server(resource_group, server_name))


def delete_database(client: AzureClient, resource_group: str, server_name: str, name: str):
    client.sql().databases.begin_delete(resource_group, server_name, name).result()
    return name


def delete_all_databases(
    client: AzureClient, resource_group: str, server_name: str
) -> List[OperationResult]:
    """
    Delete every database on a server, one at a time

    A failed deletion is recorded and logged; the remaining databases are
    still attempted.

    Returns:
        List[OperationResult]: One result per database, in listing order
    """
    results = []
    for database in list_server_databases(client, resource_group, server_name):
        logger.info(f"🔄 List and delete database with name {database.name}")
        result = attempt(
            f"Delete SQL database {database.name}",
            delete_database,
            client,
            resource_group,
            server_name,
            database.name,
        )
        if result.ok:
            logger.info(f"✅ Deleted database {database.name}")
        results.append(result)

    failed = [r for r in results if not r.ok]
    if failed:
        logger.warning(f"⚠️ {len(failed)} of {len(results)} database deletions failed")
    return results
