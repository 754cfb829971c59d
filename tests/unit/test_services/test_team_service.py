"""Tests for team member services."""

import pytest

from sabi.models.base import parse_input
from sabi.models.team_member import CreateTeamMemberInput, UpdateTeamMemberInput
from sabi.services.team import (
    create_member,
    deactivate_member,
    get_member,
    list_active_members,
    list_all_members,
    update_member,
)
from sabi.utils.errors import NotFoundError, ValidationError


@pytest.mark.unit
@pytest.mark.asyncio
async def test_active_members_in_display_order(team_store):
    members = await list_active_members(team_store)

    assert [member.id for member in members] == ["member-ceo", "member-sales", "member-ops"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_admin_list_includes_inactive(team_store):
    members = await list_all_members(team_store)

    assert [member.id for member in members][0] == "member-former"
    assert len(members) == 4


@pytest.mark.unit
@pytest.mark.asyncio
async def test_create_member(empty_store):
    data = parse_input(CreateTeamMemberInput, {"name": "Tunde Bakare", "role": "Head of Sales", "displayOrder": 2})

    member = await create_member(empty_store, data)

    assert member.is_active is True
    assert member.display_order == 2
    assert empty_store.rows[member.id]["name"] == "Tunde Bakare"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_create_member_requires_role(empty_store):
    with pytest.raises(ValidationError) as exc_info:
        parse_input(CreateTeamMemberInput, {"name": "Tunde Bakare", "role": ""})

    assert exc_info.value.field == "role"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_update_member(team_store):
    member = await update_member(team_store, "member-ops", parse_input(UpdateTeamMemberInput, {"displayOrder": 0}))

    assert member.display_order == 0
    active = await list_active_members(team_store)
    assert active[0].id == "member-ops"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_deactivate_hides_member_but_keeps_row(team_store):
    await deactivate_member(team_store, "member-ceo")

    assert "member-ceo" not in [member.id for member in await list_active_members(team_store)]
    assert (await get_member(team_store, "member-ceo")).is_active is False


@pytest.mark.unit
@pytest.mark.asyncio
async def test_missing_member(team_store):
    with pytest.raises(NotFoundError):
        await deactivate_member(team_store, "nobody")
    with pytest.raises(NotFoundError):
        await get_member(team_store, "nobody")
