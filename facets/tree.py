""" Rebuild the parent/child term hierarchy and flatten it for indented rendering """

import logging
from collections import defaultdict

log = logging.getLogger(__name__)


def build_term_tree(terms):
    """
    Return the terms in depth-first pre-order with their `level` set.

    Terms whose parent is absent from the set are roots at level 0. Siblings
    keep the order they came in. Terms that cannot be reached from any root
    (parent cycles) are rooted at level 0 where the first of them appears.
    """
    ids = {term.id for term in terms}
    children = defaultdict(list)
    roots = []
    for term in terms:
        if term.parent_id is None or term.parent_id not in ids or term.parent_id == term.id:
            roots.append(term)
        else:
            children[term.parent_id].append(term)

    ordered = []
    visited = set()

    def walk(start, level):
        # explicit stack, children pushed reversed to keep pre-order
        stack = [(start, level)]
        while stack:
            term, depth = stack.pop()
            if term.id in visited:
                continue
            visited.add(term.id)
            ordered.append(term.with_level(depth))
            stack.extend((child, depth + 1) for child in reversed(children[term.id]) if child.id not in visited)

    for root in roots:
        walk(root, 0)

    for term in terms:
        if term.id not in visited:
            log.warning("Term %s has a cyclic parent chain, rendering it as a root", term.slug)
            walk(term, 0)

    return tuple(ordered)
