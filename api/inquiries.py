"""
Inquiries endpoint.

POST                 public contact form submission
GET                  all inquiries, newest first (admin)
PUT     ?id=<id>     change status (admin)
"""

from sabi.services import inquiry_intake
from sabi.services.admin_auth import default_authorizer
from sabi.services.admin_gateway import AdminMutationGateway
from sabi.services.store import CollectionStore, inquiry_store
from sabi.utils.http import dispatch, json_response, parse_json_body, require_param, run_async


def get_inquiry_store() -> CollectionStore:
    return inquiry_store()


def get_gateway() -> AdminMutationGateway:
    return AdminMutationGateway(default_authorizer, inquiries_store=get_inquiry_store())


def _post(request):
    inquiry = run_async(inquiry_intake.submit_inquiry(get_inquiry_store(), parse_json_body(request)))
    return json_response(201, {"inquiry": inquiry.to_wire()})


def _get(request):
    get_gateway().require_admin(request)
    inquiries = run_async(inquiry_intake.list_inquiries(get_inquiry_store()))
    return json_response(200, {"inquiries": [inquiry.to_wire() for inquiry in inquiries]})


def _put(request):
    inquiry_id = require_param(request, "id")
    inquiry = run_async(get_gateway().update_inquiry_status(request, inquiry_id, parse_json_body(request)))
    return json_response(200, {"inquiry": inquiry.to_wire()})


def handler(request):
    return dispatch(request, {"GET": _get, "POST": _post, "PUT": _put}, "inquiries")
