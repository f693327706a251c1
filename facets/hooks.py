"""
Extension points of the facet pipeline.

A hook is a plain function `hook(terms, taxonomy) -> terms` taking and returning
a sequence of CountedTerm. Hooks run in registration order at three fixed stages:

    post_merge  - after counts are attached, before stale selections are checked
    pre_filter  - after the tree is built, before empty terms are dropped
    post_order  - after ordering, before names are translated

Hooks are configured with the FACETS_TERM_HOOKS setting:

    FACETS_TERM_HOOKS = {"post_merge": ["myapp.facets.hide_uncategorized"]}
"""

import logging

from django.conf import settings

from .exceptions import InvalidInput
from .utils import _load_class

log = logging.getLogger(__name__)

POST_MERGE = "post_merge"
PRE_FILTER = "pre_filter"
POST_ORDER = "post_order"
STAGES = (POST_MERGE, PRE_FILTER, POST_ORDER)


class FacetHooks:
    """
    Ordered hook functions per pipeline stage.
    """

    def __init__(self, hooks=None):
        hooks = hooks or {}
        unknown = set(hooks) - set(STAGES)
        if unknown:
            raise ValueError(f"Unknown facet hook stage(s): {', '.join(sorted(unknown))}")
        self._hooks = {stage: tuple(hooks.get(stage, ())) for stage in STAGES}

    def __getitem__(self, stage):
        return self._hooks[stage]

    def run(self, stage, terms, taxonomy):
        """
        Pass the terms through every hook of the stage. A hook failing makes the facet render nothing.
        """
        for hook in self._hooks[stage]:
            try:
                terms = tuple(hook(terms, taxonomy))
            # protect around any problems introduced by hooks
            except Exception as ex:  # pylint: disable=broad-except
                log.exception("error running %s hook %r for taxonomy %s", stage, hook, taxonomy)
                raise InvalidInput(f"Facet hook {hook!r} failed: {ex}") from ex
        return terms

    @classmethod
    def from_settings(cls):
        """
        Load the hook functions named in FACETS_TERM_HOOKS
        """
        configured = getattr(settings, "FACETS_TERM_HOOKS", {})
        hooks = {}
        try:
            for stage, paths in configured.items():
                loaded = [_load_class(path, None) for path in paths]
                missing = [path for path, hook in zip(paths, loaded) if hook is None]
                if missing:
                    raise ImportError(f"Could not load facet hook(s): {', '.join(missing)}")
                hooks[stage] = loaded
            return cls(hooks)
        except (ImportError, ValueError) as ex:
            log.error("Misconfigured FACETS_TERM_HOOKS: %s", ex)
            raise InvalidInput(str(ex)) from ex
