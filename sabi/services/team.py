"""Team members. Removal is a soft delete: the row stays, hidden from the public page."""

from sabi.models.base import parse_input
from sabi.models.team_member import CreateTeamMemberInput, TeamMember, UpdateTeamMemberInput
from sabi.services.mapping import from_row, from_rows, to_row
from sabi.services.store import CollectionStore
from sabi.utils.errors import NotFoundError
from sabi.utils.ids import utc_now
from sabi.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


async def list_active_members(store: CollectionStore) -> list[TeamMember]:
    rows = await store.list(filters={"is_active": True}, order_by="display_order")
    return from_rows(TeamMember, rows)


async def list_all_members(store: CollectionStore) -> list[TeamMember]:
    rows = await store.list(order_by="display_order")
    return from_rows(TeamMember, rows)


async def get_member(store: CollectionStore, member_id: str) -> TeamMember:
    row = await store.get(member_id)
    if row is None:
        raise NotFoundError(f"Team member not found: {member_id}")
    return from_row(TeamMember, row)


async def create_member(store: CollectionStore, data: CreateTeamMemberInput) -> TeamMember:
    now = utc_now().isoformat()
    row = to_row(TeamMember, {**data.model_dump(mode="json"), "created_at": now, "updated_at": now})
    member = from_row(TeamMember, await store.insert(row))
    logger.info("Team member created", member_id=member.id, display_order=member.display_order)
    return member


async def update_member(store: CollectionStore, member_id: str, data: UpdateTeamMemberInput) -> TeamMember:
    existing = await get_member(store, member_id)
    changes = {**data.changes(), "updated_at": utc_now().isoformat()}
    parse_input(TeamMember, {**existing.model_dump(mode="json"), **changes})

    row = await store.update(member_id, to_row(TeamMember, changes))
    if row is None:
        raise NotFoundError(f"Team member not found: {member_id}")
    return from_row(TeamMember, row)


async def deactivate_member(store: CollectionStore, member_id: str) -> TeamMember:
    row = await store.update(member_id, {"is_active": False, "updated_at": utc_now().isoformat()})
    if row is None:
        raise NotFoundError(f"Team member not found: {member_id}")
    logger.info("Team member deactivated", member_id=member_id)
    return from_row(TeamMember, row)
