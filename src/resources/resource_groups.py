"""
Resource Groups - Resources Layer

Creation and deletion of the resource group that contains everything the
sample provisions, plus a scope that guarantees the group is cleaned up.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional
import logging

from azure.mgmt.core.tools import parse_resource_id

from ..coreutils.client import AzureClient
from ..coreutils.result import OperationResult, attempt

logger = logging.getLogger(__name__)


@dataclass
class ResourceGroupContext:
    """What the provisioning phase hands to the cleanup phase"""

    name: str
    id: str
    cleanup: Optional[OperationResult] = None


def create_resource_group(client: AzureClient, name: str, region: str):
    """Create (or update) a resource group and return the SDK model"""
    logger.info(f"🔄 Creating resource group {name} in {region}...")
    resource_group = client.resources().resource_groups.create_or_update(
        name, {"location": region}
    )
    logger.info(f"✅ Created a resource group with name: {resource_group.name}")
    return resource_group


def delete_resource_group(client: AzureClient, resource_group_id: str) -> str:
    """
    Delete a resource group by its ARM id and wait for completion

    Returns:
        str: Name of the deleted group
    """
    parts = parse_resource_id(resource_group_id)
    name = parts["resource_group"]
    logger.info("🧹 Deleting Resource Group...")
    client.resources(parts.get("subscription")).resource_groups.begin_delete(name).result()
    logger.info(f"✅ Deleted Resource Group: {name}")
    return name


@contextmanager
def resource_group_scope(
    client: AzureClient, name: str, region: str
) -> Iterator[ResourceGroupContext]:
    """
    Create a resource group and always try to delete it on exit

    Nothing is cleaned up if the creation itself fails. Once the group exists,
    exactly one deletion is attempted however the body exits. A failed
    deletion is logged and recorded on the context, never raised.
    """
    resource_group = create_resource_group(client, name, region)
    context = ResourceGroupContext(name=resource_group.name, id=resource_group.id)
    try:
        yield context
    finally:
        context.cleanup = attempt(
            f"Delete resource group {context.name}",
            delete_resource_group,
            client,
            context.id,
        )
