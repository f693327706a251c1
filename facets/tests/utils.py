""" Test utilities """

import json

from django.test import Client

from facets.aggregation import AggregationSource
from facets.dataclasses import CountedTerm, Term
from facets.selection import SelectionSet
from facets.tests.mock_term_source import MockTermSource


def make_terms(*records):
    """
    Build Terms from (id, slug, parent_id) tuples, the name being the capitalised slug
    """
    return [Term(id=id_, slug=slug, name=slug.capitalize(), parent_id=parent) for id_, slug, parent in records]


def make_counted(*records):
    """
    Build root CountedTerms from (slug, count) tuples
    """
    return tuple(
        CountedTerm(id=index, slug=slug, name=slug.capitalize(), count=count)
        for index, (slug, count) in enumerate(records, start=1)
    )


def slugs(terms):
    return [term.slug for term in terms]


def selection(*selected):
    return SelectionSet(selected)


def post_facet_request(body, query=""):
    """
    Helper method to post the request and process the response
    """
    address = '/facet/{}'.format(f"?{query}" if query else "")
    response = Client().post(address, json.dumps(body), content_type="application/json")

    content = getattr(response, "content", b"")
    return getattr(response, "status_code", 500), json.loads(content.decode('utf-8')) if content else None


class ErroringTermSource(MockTermSource):
    """ Override to generate term source error to test """

    def get_terms(self, taxonomy, hide_empty=True, lang=None):
        raise Exception("There is a problem here")


class ErroringAggregationSource(AggregationSource):
    """ Override to generate aggregation source error to test """

    def get_counts(self, taxonomy, aggregations=None, **_kwargs):
        raise Exception("There is a problem here")


# Colour taxonomy used by most tests:
#   red(5) blue(0) green(3)
COLOR_TERMS = make_terms((1, "red", None), (2, "blue", None), (3, "green", None))
COLOR_COUNTS = {"red": 5, "green": 3}
