""" Order facet terms putting the selected ones at the top """

from .dataclasses import OrderBy


def _secondary_key(order_config):
    if order_config.orderby is OrderBy.COUNT:
        return lambda term: term.count
    return lambda term: term.slug


def order_by_selected(terms, selection, order_config):
    """
    Selected terms come first, in the order they were selected. The rest follow,
    sorted by count or by slug as configured. Equal keys keep their incoming order.
    """
    selected = sorted(
        (term for term in terms if term.slug in selection),
        key=lambda term: selection.position(term.slug),
    )
    unselected = sorted(
        (term for term in terms if term.slug not in selection),
        key=_secondary_key(order_config),
        reverse=order_config.descending,
    )
    return tuple(selected) + tuple(unselected)
