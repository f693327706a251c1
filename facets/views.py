""" handle facet http requests """
# This contains just the url entry point to use if desired

import json
import logging

from django.http import HttpResponse, JsonResponse, QueryDict
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from .api import render_facet
from .selection import selected_from_query

# log appears to be standard name used for logger
log = logging.getLogger(__name__)

INSTANCE_FIELDS = ("facet", "title", "orderby", "order", "match_type")


def parse_post_data(request):
    """Support both JSON and form-encoded input."""
    if request.content_type == 'application/json':
        try:
            body = json.loads(request.body.decode('utf-8'))
        except json.JSONDecodeError:
            log.warning("Malformed JSON received")
            return QueryDict('', mutable=True)
        if not isinstance(body, dict):
            log.warning("Expected a JSON object, received %s", type(body).__name__)
            return QueryDict('', mutable=True)

        qdict = QueryDict('', mutable=True)
        for key, value in body.items():
            if isinstance(value, list):
                for item in value:
                    qdict.appendlist(key, item)
            else:
                qdict[key] = value
        return qdict
    return request.POST


def _process_aggregations(data):
    """
    Aggregations arrive as a JSON object, or as a JSON encoded string in form posts.
    Returns None when there are none, which means the search did not succeed.
    """
    aggregations = data.get("aggregations")
    if isinstance(aggregations, str):
        try:
            aggregations = json.loads(aggregations)
        except json.JSONDecodeError:
            log.warning("Malformed aggregations received")
            return None
    if not isinstance(aggregations, dict):
        return None
    return aggregations


@require_POST
@csrf_exempt
def facet_terms(request):
    """
    Facet view for http requests

    Args:
        request (required) - django request object

    Returns:
        http json response with the following fields
            "title" - title of the facet
            "taxonomy" - taxonomy the facet filters on
            "match_type" - "all" or "any"
            "selected_terms" - slugs currently selected, in selection order
            "terms" - json array of {"slug", "name", "count", "level", "selected"}

            or

            an empty 204 response when the facet should not be shown

    POST Params:
        "facet" (required) - taxonomy to build the facet for
        "title" (optional) - title of the facet
        "orderby" (optional) - "count" or "name"
        "order" (optional) - "asc" or "desc"
        "match_type" (optional) - "all" or "any"
        "aggregations" (required) - taxonomy -> {slug: count} from the search results
        "language" (optional) - language to render term names in

    Query Params:
        "filter_<taxonomy>" - comma separated slugs currently selected
    """
    post_data = parse_post_data(request)
    instance = {field: post_data.get(field) for field in INSTANCE_FIELDS}
    language = post_data.get("language") or getattr(request, "LANGUAGE_CODE", None)

    result = render_facet(
        instance,
        selected_filters=selected_from_query(request.GET),
        aggregations=_process_aggregations(post_data),
        language=language,
        request=request,
    )
    if result is None:
        return HttpResponse(status=204)

    return JsonResponse(result.to_dict())
