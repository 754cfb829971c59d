"""Site settings endpoint: public read, admin update."""

from sabi.services.admin_auth import default_authorizer
from sabi.services.admin_gateway import AdminMutationGateway
from sabi.services.site_settings import get_site_settings
from sabi.services.store import CollectionStore, settings_store
from sabi.utils.http import dispatch, json_response, parse_json_body, run_async


def get_settings_store() -> CollectionStore:
    return settings_store()


def get_gateway() -> AdminMutationGateway:
    return AdminMutationGateway(default_authorizer, settings_store=get_settings_store())


def _get(request):
    settings = run_async(get_site_settings(get_settings_store()))
    return json_response(200, {"settings": settings.to_wire()})


def _put(request):
    settings = run_async(get_gateway().update_settings(request, parse_json_body(request)))
    return json_response(200, {"settings": settings.to_wire()})


def handler(request):
    return dispatch(request, {"GET": _get, "PUT": _put}, "settings")
