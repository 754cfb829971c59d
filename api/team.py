"""
Team endpoint.

GET     active members in display order
        ?scope=all           inactive members too (admin)
        ?id=<id>             one member (admin)
POST                         create (admin)
PUT     ?id=<id>             partial update (admin)
DELETE  ?id=<id>             deactivate (admin)
"""

from sabi.services import team
from sabi.services.admin_auth import default_authorizer
from sabi.services.admin_gateway import AdminMutationGateway
from sabi.services.store import CollectionStore, team_store
from sabi.utils.http import dispatch, json_response, parse_json_body, query_param, require_param, run_async


def get_team_store() -> CollectionStore:
    return team_store()


def get_gateway() -> AdminMutationGateway:
    return AdminMutationGateway(default_authorizer, team_store=get_team_store())


def _members_response(members) -> dict:
    return json_response(200, {"team": [member.to_wire() for member in members]})


def _get(request):
    store = get_team_store()

    member_id = query_param(request, "id")
    if member_id:
        get_gateway().require_admin(request)
        member = run_async(team.get_member(store, member_id))
        return json_response(200, {"member": member.to_wire()})

    if query_param(request, "scope") == "all":
        get_gateway().require_admin(request)
        return _members_response(run_async(team.list_all_members(store)))

    return _members_response(run_async(team.list_active_members(store)))


def _post(request):
    member = run_async(get_gateway().create_member(request, parse_json_body(request)))
    return json_response(201, {"member": member.to_wire()})


def _put(request):
    member_id = require_param(request, "id")
    member = run_async(get_gateway().update_member(request, member_id, parse_json_body(request)))
    return json_response(200, {"member": member.to_wire()})


def _delete(request):
    member_id = require_param(request, "id")
    member = run_async(get_gateway().delete_member(request, member_id))
    return json_response(200, {"member": member.to_wire()})


def handler(request):
    return dispatch(request, {"GET": _get, "POST": _post, "PUT": _put, "DELETE": _delete}, "team")
