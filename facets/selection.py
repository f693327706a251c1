""" Currently active filter selections """

from django.conf import settings

DEFAULT_FILTER_PREFIX = "filter_"


class SelectionSet:
    """
    The selected term slugs of one taxonomy, in the order they were selected.
    """

    def __init__(self, slugs=()):
        ordered = []
        for slug in slugs:
            slug = str(slug)
            if slug and slug not in ordered:
                ordered.append(slug)
        self._slugs = tuple(ordered)

    def __contains__(self, slug):
        return slug in self._slugs

    def __iter__(self):
        return iter(self._slugs)

    def __len__(self):
        return len(self._slugs)

    def __bool__(self):
        return bool(self._slugs)

    def __eq__(self, other):
        return isinstance(other, SelectionSet) and self._slugs == other._slugs

    def __repr__(self):
        return f"SelectionSet({list(self._slugs)!r})"

    @property
    def slugs(self):
        return self._slugs

    def position(self, slug):
        """ index of the slug in selection order """
        return self._slugs.index(slug)

    @classmethod
    def for_taxonomy(cls, selected_filters, taxonomy):
        """
        Pick one taxonomy out of a selection payload shaped like

            {"taxonomies": {"category": {"terms": {"shirts": True, "hats": True}}}}

        `terms` may be a mapping (its keys are the slugs), a plain sequence of slugs, or a single slug.
        """
        taxonomies = (selected_filters or {}).get("taxonomies") or {}
        terms = (taxonomies.get(taxonomy) or {}).get("terms") or ()
        if isinstance(terms, str):
            terms = (terms,)
        return cls(terms)


def filter_prefix():
    return getattr(settings, "FACETS_FILTER_PREFIX", DEFAULT_FILTER_PREFIX)


def selected_from_query(query):
    """
    Build a selection payload from query parameters, e.g. ?filter_size=small,large&filter_color=red

    `query` is a QueryDict or a plain dict; repeated parameters and comma separated values both count.
    """
    prefix = filter_prefix()
    taxonomies = {}
    for key in query:
        if not key.startswith(prefix) or len(key) == len(prefix):
            continue
        values = query.getlist(key) if hasattr(query, "getlist") else query[key]
        if isinstance(values, str):
            values = [values]
        slugs = [slug.strip() for value in values for slug in str(value).split(",") if slug.strip()]
        if slugs:
            taxonomies[key[len(prefix):]] = {"terms": {slug: True for slug in slugs}}
    return {"taxonomies": taxonomies}
