"""Field masks limiting which properties SoftLayer returns."""

from __future__ import annotations

CURRENT_USER_MASK = (
    "id",
    "accountId",
    "parentId",
    "companyName",
    "email",
    "firstName",
    "lastName",
    "ticketCount",
    "openTicketCount",
    "hardwareCount",
    "virtualGuestCount",
)

VIRTUAL_GUEST_MASK = (
    "id",
    "uuid",
    "accountId",
    "users.id",
    "hourlyBillingFlag",
    "hostname",
    "domain",
    "notes",
    "tagReferences.tag.name",
    "provisionDate",
    "bandwidthAllocation",
    "privateNetworkOnlyFlag",
    "primaryIpAddress",
    "primaryBackendIpAddress",
    "location.pathString",
    "startCpus",
    "maxCpu",
    "maxCpuUnits",
    "maxMemory",
    "type.name",
    "createDate",
    "modifyDate",
    "status.name",
    "powerState.name",
    "networkVlans.id",
    "operatingSystem.id",
    "datacenter.id",
    "location.id",
    "virtualRackName",
    "pendingMigrationFlag",
    "dedicatedAccountHostOnlyFlag",
    "dedicatedHost",
    "host",
)

VIRTUAL_GUEST_STATUS_MASK = (
    "id",
    "uuid",
    "status.name",
    "powerState.name",
    "modifyDate",
)

TICKET_MASK = (
    "id",
    "accountId",
    "assignedUserId",
    "group.name",
    "subject.name",
    "status.name",
    "firstUpdate.editorType",
    "firstUpdate.editorId",
    "firstUpdate.entry",
    "priority",
    "title",
    "createDate",
    "modifyDate",
    "lastEditDate",
    "lastEditType",
    "attachedVirtualGuests.id",
    "attachedVirtualGuests.hostname",
    "attachedVirtualGuests.domain",
    "attachedVirtualGuests.users.id",
    "attachedHardware",
    "attachedResources",
)


def render(paths: tuple[str, ...] | list[str]) -> str:
    """Render dotted paths as an ``objectMask`` value, dropping repeats."""

    seen: list[str] = []
    for path in paths:
        cleaned = path.strip()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    if not seen:
        raise ValueError("Object mask requires at least one path")
    return f"mask[{','.join(seen)}]"
