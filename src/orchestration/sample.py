"""
SQL Elastic Pool Sample - Orchestration Layer

Manages SQL databases in elastic pools:
1. Create a SQL Server with an elastic pool and 2 databases
2. Create another database and add it to the pool through a database update
3. Create one more database, add it to the pool, then remove it again
4. List and print databases in the pool
5. List and print pool activities and pool database activities
6. Add another elastic pool to the existing SQL Server
7. Delete databases, elastic pools and the SQL Server

Everything runs inside a resource group scope that is deleted on exit, whether
the workflow succeeded or not.
"""

import logging
from typing import List, Optional

from ..coreutils.client import AzureClient
from ..coreutils.env import DEFAULT_REGION
from ..coreutils.logging import log_listing
from ..coreutils.naming import NameGenerator, create_password
from ..coreutils.result import OperationResult, attempt
from ..resources import databases, elastic_pools, schemas, servers
from ..resources.resource_groups import resource_group_scope

logger = logging.getLogger(__name__)


def log_pool_databases(
    client: AzureClient, resource_group: str, server_name: str, pool_name: str
) -> List[str]:
    """Log the current members of a pool and return their names"""
    names = [
        db.name
        for db in databases.list_pool_databases(client, resource_group, server_name, pool_name)
    ]
    log_listing(
        logger,
        "Current databases in the elastic pool",
        (f"Current databases in the elastic pool with databasename: {n}" for n in names),
    )
    return names


def provision_and_teardown(
    client: AzureClient, resource_group: str, region: str, names: NameGenerator, summary: dict
):
    """Steps 3-18 of the sample, run inside an existing resource group"""
    # ============================================================
    # Create a SQL Server, with 2 firewall rules.
    logger.info("🔄 Creating a SQL Server with 2 firewall rules")
    server_name = names.server(schemas.SERVER_PREFIX)
    server = servers.create_server(
        client,
        resource_group,
        server_name,
        region,
        schemas.admin_login_for(server_name),
        create_password(),
    )
    summary["server"] = server.name

    logger.info("🔄 Creating 2 firewall rules...")
    summary["firewall_rules"] = []
    for prefix, (start_ip, end_ip) in zip(
        schemas.FIREWALL_RULE_PREFIXES, schemas.FIREWALL_RULE_RANGES
    ):
        rule = servers.create_firewall_rule(
            client, resource_group, server.name, names.firewall_rule(prefix), start_ip, end_ip
        )
        summary["firewall_rules"].append(rule.name)

    # ============================================================
    # Create an elastic pool with 2 databases in it.
    pool_name = names.elastic_pool(schemas.ELASTIC_POOL_PREFIX)
    pool = elastic_pools.create_elastic_pool(
        client, resource_group, server.name, pool_name, region, schemas.base_pool_sku()
    )
    summary["elastic_pools"] = [pool.name]

    logger.info("🔄 Creating 2 databases in the elastic pool...")
    summary["databases"] = []
    for prefix in schemas.DATABASE_PREFIXES:
        database = databases.create_database(
            client, resource_group, server.name, names.database(prefix), region, pool.id
        )
        summary["databases"].append(database.name)

    # ============================================================
    # List and print the elastic pools, then get the one we created.
    log_listing(
        logger,
        "Elastic pools on the SQL Server",
        (
            f"List and prints the elastic pools with elastic pools name: {p.name}"
            for p in elastic_pools.list_elastic_pools(client, resource_group, server.name)
        ),
    )
    fetched = elastic_pools.get_elastic_pool(client, resource_group, server.name, pool_name)
    logger.info(f"📊 Get and prints the elastic pool with name: {fetched.name}")

    # ============================================================
    # Change DTUs in the elastic pool.
    pool = elastic_pools.update_elastic_pool(client, resource_group, server.name, pool_name)

    membership = summary["pool_membership"] = {}
    membership["after_pool_update"] = log_pool_databases(
        client, resource_group, server.name, pool_name
    )

    # ============================================================
    # Create a standalone database, then move it into the pool.
    logger.info("🔄 Creating a database")
    new_database = databases.create_database(
        client, resource_group, server.name, names.database(schemas.NEW_DATABASE_PREFIX), region
    )
    summary["databases"].append(new_database.name)
    membership["after_standalone_create"] = log_pool_databases(
        client, resource_group, server.name, pool_name
    )

    databases.attach_to_pool(client, resource_group, server.name, new_database.name, pool.id)

    # ============================================================
    # Create another database and move it into the pool.
    another_database = databases.create_database(
        client,
        resource_group,
        server.name,
        names.database(schemas.ANOTHER_DATABASE_PREFIX),
        region,
    )
    summary["databases"].append(another_database.name)

    logger.info("🔄 Update the elastic pool to have newly created database")
    databases.attach_to_pool(client, resource_group, server.name, another_database.name, pool.id)
    membership["after_attach"] = log_pool_databases(
        client, resource_group, server.name, pool_name
    )

    # ============================================================
    # Remove the database from the elastic pool.
    databases.detach_from_pool(
        client,
        resource_group,
        server.name,
        another_database.name,
        schemas.standalone_database_sku(),
    )
    membership["after_detach"] = log_pool_databases(
        client, resource_group, server.name, pool_name
    )

    # ============================================================
    # List and print the pool's activities and its database activities.
    log_listing(
        logger,
        "Activities in a elastic pool",
        (
            f"Activities in a elastic pool with id: {activity.name}"
            for activity in elastic_pools.list_pool_activities(
                client, resource_group, server.name, pool_name
            )
        ),
    )
    log_listing(
        logger,
        "Database activities in a elastic pool",
        (
            f"Activities in a elastic pool with databasename: {activity.database_name}"
            for activity in elastic_pools.list_pool_database_activities(
                client, resource_group, server.name, pool_name
            )
        ),
    )

    # ============================================================
    # List databases in the SQL Server and delete them.
    logger.info("🔄 List and delete all databases from SQL Server")
    summary["database_deletions"] = [
        result.to_dict()
        for result in databases.delete_all_databases(client, resource_group, server.name)
    ]

    # ============================================================
    # Create another elastic pool in the SQL Server.
    logger.info("🔄 Creating ElasticPool in existing SQL Server...")
    second_pool = elastic_pools.create_elastic_pool(
        client,
        resource_group,
        server.name,
        names.elastic_pool(schemas.SECOND_ELASTIC_POOL_PREFIX),
        region,
        schemas.standard_pool_sku(),
    )
    summary["elastic_pools"].append(second_pool.name)

    # ============================================================
    # Delete the elastic pools, then the SQL Server.
    logger.info("🔄 Delete the elastic pools from the SQL Server")
    for name in (pool_name, second_pool.name):
        elastic_pools.delete_elastic_pool(client, resource_group, server.name, name)

    servers.delete_server(client, resource_group, server.name)


def run_sample(
    client: AzureClient,
    names: Optional[NameGenerator] = None,
    region: str = DEFAULT_REGION,
) -> OperationResult:
    """
    Run the elastic pool sample end to end

    Args:
        client: Authenticated AzureClient
        names: Name generator, a fresh one per run by default
        region: Azure region for every resource

    Returns:
        OperationResult: value is the run summary dict, whether or not the
        workflow failed. error holds the failure that stopped it, if any.
    """
    names = names or NameGenerator()
    summary = {"region": region}
    scopes = []

    def workflow():
        subscription_id = client.get_default_subscription()
        summary["subscription"] = subscription_id
        logger.info(f"🚀 Starting SQL elastic pool sample in subscription {subscription_id}")

        rg_name = names.resource_group(schemas.RESOURCE_GROUP_PREFIX)
        with resource_group_scope(client, rg_name, region) as resource_group:
            scopes.append(resource_group)
            summary["resource_group"] = resource_group.name
            provision_and_teardown(client, resource_group.name, region, names, summary)

    result = attempt("SQL elastic pool sample", workflow)

    # cleanup is only filled in once the scope has exited
    for resource_group in scopes:
        summary["cleanup"] = resource_group.cleanup.to_dict()

    result.value = summary
    if result.ok:
        logger.info("✅ SQL elastic pool sample completed successfully")
    return result
