""" facet business logic implementations """

import logging

from eventtracking import tracker as track

from .aggregation import AggregationSource, merge_counts
from .dataclasses import FacetInstance, FacetNode, FacetResult
from .exceptions import FacetError, InvalidInput, MissingSelection, UpstreamUnavailable
from .hooks import POST_MERGE, POST_ORDER, PRE_FILTER, FacetHooks
from .localization import LocalizationContext, TermTranslator, resolve_names
from .ordering import order_by_selected
from .relevance import filter_relevant
from .selection import SelectionSet
from .term_source import TermSource
from .tree import build_term_tree
from .utils import Timer

log = logging.getLogger(__name__)


def check_selection(terms, selection, taxonomy):
    """
    Make sure every selected slug still exists before rendering
    """
    slugs = {term.slug for term in terms}
    for slug in selection:
        if slug not in slugs:
            raise MissingSelection(taxonomy, slug)


def build_facet(instance, terms, counts, selection, context=None, translator=None, hooks=None):
    """
    Turn the raw terms of one taxonomy into the ordered, leveled nodes of a facet.

    Args:
        instance - FacetInstance being rendered
        terms - Terms of the taxonomy in store order
        counts - slug -> count mapping from the search backend
        selection - SelectionSet of the taxonomy
        context (optional) - LocalizationContext, names are left alone without one
        translator (optional) - TermTranslator used when the context needs translation
        hooks (optional) - FacetHooks

    Inputs are never modified. Raises a FacetError when the facet cannot be rendered.
    """
    taxonomy = instance.facet
    hooks = hooks or FacetHooks()
    context = context or LocalizationContext()

    counted = merge_counts(taxonomy, terms, counts)
    counted = hooks.run(POST_MERGE, counted, taxonomy)
    check_selection(counted, selection, taxonomy)

    tree = build_term_tree(counted)
    tree = hooks.run(PRE_FILTER, tree, taxonomy)

    relevant = filter_relevant(tree, selection)
    ordered = order_by_selected(relevant, selection, instance.order_config)
    ordered = hooks.run(POST_ORDER, ordered, taxonomy)

    if translator is not None:
        ordered = resolve_names(ordered, taxonomy, context, translator)

    return FacetResult(
        title=instance.title,
        taxonomy=taxonomy,
        match_type=instance.match_type,
        selected_terms=selection.slugs,
        terms=tuple(
            FacetNode(
                slug=str(term.slug),
                name=term.name,
                count=term.count,
                level=term.level,
                selected=term.slug in selection,
            )
            for term in ordered
        ),
    )


def _fetch_counts(taxonomy, aggregations, **kwargs):
    try:
        counts = AggregationSource.get_aggregation_source().get_counts(taxonomy, aggregations=aggregations, **kwargs)
    except FacetError:
        raise
    except Exception as ex:  # pylint: disable=broad-except
        log.exception("error fetching aggregation counts for %s", taxonomy)
        raise UpstreamUnavailable(f"Aggregation source failed for '{taxonomy}'") from ex
    if counts is None:
        raise UpstreamUnavailable(f"No search results to count terms of '{taxonomy}' against")
    return counts


def _fetch_terms(term_source, taxonomy, context):
    try:
        if not term_source.has_taxonomy(taxonomy):
            raise InvalidInput(f"Unknown taxonomy '{taxonomy}'")
        return term_source.get_terms(taxonomy, hide_empty=True, lang=context.base_language)
    except FacetError:
        raise
    except Exception as ex:  # pylint: disable=broad-except
        log.exception("error fetching terms for %s", taxonomy)
        raise UpstreamUnavailable(f"Term source failed for '{taxonomy}'") from ex


def get_facet(instance, selected_filters=None, aggregations=None, language=None, **kwargs):
    """
    Fetch terms and counts from the configured collaborators and build the facet

    Args:
        instance - FacetInstance, or the raw instance settings dictionary
        selected_filters (optional) - selection payload, see SelectionSet.for_taxonomy
        aggregations (optional) - taxonomy -> bucket, as handed to the AggregationSource
        language (optional) - language the page is requested in
    """
    if isinstance(instance, dict):
        instance = FacetInstance.from_dict(instance)
    taxonomy = instance.facet
    if not taxonomy:
        raise InvalidInput("No taxonomy selected for facet")

    fetch_timer = Timer()
    fetch_timer.start()
    context = LocalizationContext.for_language(language)
    term_source = TermSource.get_term_source()
    counts = _fetch_counts(taxonomy, aggregations, **kwargs)
    terms = _fetch_terms(term_source, taxonomy, context)
    fetch_timer.stop()

    processing_timer = Timer()
    processing_timer.start()
    result = build_facet(
        instance,
        terms,
        counts,
        SelectionSet.for_taxonomy(selected_filters, taxonomy),
        context=context,
        translator=TermTranslator.get_translator(term_source),
        hooks=FacetHooks.from_settings(),
    )
    processing_timer.stop()

    emit_facet_timing_event(taxonomy, len(result.terms), fetch_timer, processing_timer)
    return result


def render_facet(instance, selected_filters=None, aggregations=None, language=None, **kwargs):
    """
    Same as get_facet, but returns None whenever the facet should not be shown
    """
    try:
        result = get_facet(
            instance,
            selected_filters=selected_filters,
            aggregations=aggregations,
            language=language,
            **kwargs
        )
    except FacetError as err:
        log.debug("Not rendering facet: %s", err)
        return None

    if not result.terms:
        log.debug("Not rendering facet %s: no terms left to show", result.taxonomy)
        return None
    return result


def emit_facet_timing_event(taxonomy, terms_count, fetch_timer, processing_timer):
    """
    Emit the timing event for a rendered facet
    """
    track.emit("facets.taxonomy.rendered", {
        "taxonomy": taxonomy,
        "terms_count": terms_count,
        "fetch_time": {
            "start": fetch_timer.start_time,
            "end": fetch_timer.end_time,
            "elapsed": fetch_timer.elapsed_time,
        },
        "processing_time": {
            "start": processing_timer.start_time,
            "end": processing_timer.end_time,
            "elapsed": processing_timer.elapsed_time,
        },
    })
