""" Join taxonomy terms with the per-slug hit counts produced by the search backend """

import logging

from django.conf import settings

from .dataclasses import CountedTerm
from .exceptions import InvalidInput
from .utils import _load_class

log = logging.getLogger(__name__)


def _coerce_count(value):
    """ absent, empty or malformed counts are 0, negative counts are clamped to 0 """
    try:
        return max(0, int(value or 0))
    except (TypeError, ValueError):
        log.warning("Ignoring non-numeric aggregation count %r", value)
        return 0


def bucket_counts(bucket):
    """
    Return the slug -> count mapping of one aggregation bucket.

    Accepts either a plain mapping or the bucket form returned by the search engine:
        {"terms": {"red": 5, "green": 3}, "total": 8, "other": 0}
    """
    if not bucket:
        return {}
    if isinstance(bucket.get("terms"), dict):
        return bucket["terms"]
    return bucket


def merge_counts(taxonomy, terms, aggregation):
    """
    Attach the aggregation count to every term, keyed by slug.

    Raises InvalidInput when there is no taxonomy or no terms. Later terms
    repeating an earlier slug are dropped.
    """
    if not taxonomy:
        raise InvalidInput("No taxonomy selected for facet")
    if not terms:
        raise InvalidInput(f"No terms found for taxonomy '{taxonomy}'")

    counts = bucket_counts(aggregation)
    counted_terms = []
    seen_slugs = set()
    for term in terms:
        if term.slug in seen_slugs:
            log.warning("Duplicate term slug %s in taxonomy %s, keeping the first", term.slug, taxonomy)
            continue
        seen_slugs.add(term.slug)
        counted_terms.append(CountedTerm.from_term(term, _coerce_count(counts.get(term.slug))))

    return tuple(counted_terms)


class AggregationSource:

    """
    Class to supply the aggregation counts for a facet.
    Users of this app will override this class and update setting for FACETS_AGGREGATION_SOURCE

    The base implementation looks the taxonomy up in the `aggregations` passed
    along with the render, a mapping of taxonomy -> bucket as found under the
    "aggs" key of search results. Passing `aggregations=None` means the search
    backend did not succeed.
    """

    def get_counts(self, taxonomy, aggregations=None, **_kwargs):
        """
        Return the slug -> count mapping for the taxonomy, or None when the backend has no results
        """
        if aggregations is None:
            return None
        return bucket_counts(aggregations.get(taxonomy))

    @classmethod
    def get_aggregation_source(cls):
        """
        Finds desired subclass (defined in settings)
        """
        return _load_class(getattr(settings, "FACETS_AGGREGATION_SOURCE", None), cls)()
