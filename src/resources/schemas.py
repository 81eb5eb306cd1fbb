"""
Resources Layer Schemas

Fixed settings and request payloads for the SQL resources the sample creates.
Every builder returns a fresh model so payloads are never shared between calls.
"""

from azure.mgmt.sql.models import (
    Database,
    DatabaseUpdate,
    ElasticPool,
    ElasticPoolPerDatabaseSettings,
    ElasticPoolUpdate,
    FirewallRule,
    Server,
    Sku,
)

# Name prefixes, randomized per run
RESOURCE_GROUP_PREFIX = "rgSQLServer"
SERVER_PREFIX = "sqlserver-elasticpooltest"
FIREWALL_RULE_PREFIXES = ("firewallrule1st-", "firewallrule2nd-")
ELASTIC_POOL_PREFIX = "myElasticPool"
SECOND_ELASTIC_POOL_PREFIX = "secondElasticPool"
DATABASE_PREFIXES = ("myDatabase1", "myDatabase2")
NEW_DATABASE_PREFIX = "myNewDatabase"
ANOTHER_DATABASE_PREFIX = "myAnotherDatabase"

ADMIN_LOGIN_PREFIX = "sqladmin"

# (start, end) address pairs, in creation order
FIREWALL_RULE_RANGES = (
    ("10.2.0.1", "10.2.0.10"),
    ("10.0.0.1", "10.0.0.10"),
)

STANDARD_POOL_SKU = "StandardPool"
STANDARD_TIER = "Standard"

# Pool after the DTU change
UPDATED_POOL_CAPACITY = 200
PER_DATABASE_MIN_CAPACITY = 10
PER_DATABASE_MAX_CAPACITY = 50

# Standalone SKU for a database leaving its pool
STANDALONE_DATABASE_SKU = "S2"
STANDALONE_DATABASE_CAPACITY = 50


def admin_login_for(server_name: str) -> str:
    return ADMIN_LOGIN_PREFIX + server_name


def server_payload(region: str, admin_login: str, admin_password: str) -> Server:
    return Server(
        location=region,
        administrator_login=admin_login,
        administrator_login_password=admin_password,
    )


def firewall_rule_payload(start_ip: str, end_ip: str) -> FirewallRule:
    return FirewallRule(start_ip_address=start_ip, end_ip_address=end_ip)


def base_pool_sku() -> Sku:
    return Sku(name=STANDARD_POOL_SKU)


def standard_pool_sku(capacity: int | None = None) -> Sku:
    return Sku(name=STANDARD_POOL_SKU, tier=STANDARD_TIER, capacity=capacity)


def standalone_database_sku() -> Sku:
    return Sku(
        name=STANDALONE_DATABASE_SKU,
        tier=STANDARD_TIER,
        capacity=STANDALONE_DATABASE_CAPACITY,
    )


def elastic_pool_payload(region: str, sku: Sku) -> ElasticPool:
    return ElasticPool(location=region, sku=sku)


def elastic_pool_update_payload() -> ElasticPoolUpdate:
    """Raise the pool to 200 DTUs and bound each database to 10-50 DTUs"""
    return ElasticPoolUpdate(
        sku=standard_pool_sku(UPDATED_POOL_CAPACITY),
        per_database_settings=ElasticPoolPerDatabaseSettings(
            min_capacity=PER_DATABASE_MIN_CAPACITY,
            max_capacity=PER_DATABASE_MAX_CAPACITY,
        ),
    )


def database_payload(region: str, elastic_pool_id: str | None = None) -> Database:
    return Database(location=region, elastic_pool_id=elastic_pool_id)


def attach_to_pool_payload(elastic_pool_id: str) -> DatabaseUpdate:
    if not elastic_pool_id:
        raise ValueError("An elastic pool id is required to attach a database")
    return DatabaseUpdate(elastic_pool_id=elastic_pool_id)


def detach_from_pool_payload(sku: Sku | None) -> DatabaseUpdate:
    """
    Move a database out of its pool

    The service only lets a database leave a pool when it is given a
    standalone SKU in the same update.
    """
    if sku is None:
        raise ValueError("A standalone SKU is required to remove a database from its pool")
    return DatabaseUpdate(sku=sku, elastic_pool_id=None)
