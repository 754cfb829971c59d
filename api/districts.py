"""Districts endpoint: the static Abuja district directory."""

from sabi.services.districts import ABUJA_DISTRICTS
from sabi.utils.errors import NotFoundError
from sabi.utils.http import dispatch, json_response, query_param


def _get(request):
    name = query_param(request, "name")
    if name:
        district = ABUJA_DISTRICTS.get(name)
        if district is None:
            raise NotFoundError(f"District not found: {name}")
        return json_response(200, {"district": district.to_wire()})

    return json_response(200, {"districts": [district.to_wire() for district in ABUJA_DISTRICTS]})


def handler(request):
    return dispatch(request, {"GET": _get}, "districts")
