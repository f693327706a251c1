"""
Failure reasons raised by the facet pipeline.

Every reason is a FacetError; callers that render facets map any FacetError
to "emit nothing".
"""


class FacetError(Exception):
    """
    Base class for any reason a facet cannot be rendered.
    """


class InvalidInput(FacetError):
    """
    Malformed or empty configuration: no taxonomy selected, unknown taxonomy, no terms.
    """


class UpstreamUnavailable(FacetError):
    """
    The term source or aggregation source could not supply data.
    """


class MissingSelection(FacetError):
    """
    A selected term slug is no longer present in the current term set.
    """

    def __init__(self, taxonomy, slug):
        super().__init__(f"Selected term '{slug}' does not exist in taxonomy '{taxonomy}'")
        self.taxonomy = taxonomy
        self.slug = slug


class TranslationMiss(FacetError):
    """
    No translated counterpart was found for one term. Never fatal.
    """
