""" Drop terms that have nothing to do with the current result set """


def filter_relevant(terms, selection):
    """
    Keep the terms with hits. When anything in the taxonomy is selected every
    term stays, so a selection that now matches nothing does not vanish from the facet.
    """
    if selection:
        return tuple(terms)
    return tuple(term for term in terms if term.count > 0)
