"""
Defines the dataclasses used in the facets module.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Literal, Optional, Tuple

from django.conf import settings

from .exceptions import InvalidInput

INSTANCE_STRING_FIELDS = ("facet", "title", "orderby", "order", "match_type")


class OrderBy(Enum):
    """
    Enum for the secondary sort key of a facet.
    """
    COUNT = "count"
    NAME = "name"

    @classmethod
    def parse(cls, value):
        """ anything other than "count" sorts by name """
        return cls.COUNT if value == cls.COUNT.value else cls.NAME


@dataclass(frozen=True)
class Term:
    """
    A taxonomy term as supplied by the term source.
    """
    id: Any
    slug: str
    name: str
    parent_id: Optional[Any] = None


@dataclass(frozen=True)
class CountedTerm:
    """
    A term with its live hit count and its depth in the term tree.
    """
    id: Any
    slug: str
    name: str
    parent_id: Optional[Any] = None
    count: int = 0
    level: int = 0

    @classmethod
    def from_term(cls, term, count=0):
        """ wrap a Term, starting it off as a root """
        return cls(id=term.id, slug=term.slug, name=term.name, parent_id=term.parent_id, count=count)

    def with_level(self, level):
        return replace(self, level=level)

    def with_name(self, name):
        return replace(self, name=name)


@dataclass(frozen=True)
class OrderConfig:
    """
    How the unselected terms of a facet are ordered.
    """
    orderby: OrderBy = OrderBy.COUNT
    order: Literal["asc", "desc"] = "desc"

    @classmethod
    def build(cls, orderby=None, order=None):
        """
        Normalise raw instance values, falling back to the configured defaults.
        Any order other than "asc" is descending.
        """
        if orderby is None:
            orderby = getattr(settings, "FACETS_DEFAULT_ORDERBY", OrderBy.COUNT.value)
        if order is None:
            order = getattr(settings, "FACETS_DEFAULT_ORDER", "desc")
        if not isinstance(orderby, OrderBy):
            orderby = OrderBy.parse(orderby)
        return cls(orderby=orderby, order="asc" if order == "asc" else "desc")

    @property
    def descending(self):
        return self.order != "asc"


@dataclass(frozen=True)
class FacetInstance:
    """
    Per widget/block configuration of a facet.
    """
    facet: str
    title: str = ""
    order_config: OrderConfig = field(default_factory=OrderConfig.build)
    match_type: Literal["all", "any"] = "all"

    @classmethod
    def from_dict(cls, instance):
        """
        build from the raw instance settings, e.g. {"facet": "category", "orderby": "name"}

        Raises InvalidInput when a setting is present but is not a string.
        """
        for name in INSTANCE_STRING_FIELDS:
            value = instance.get(name)
            if value is not None and not isinstance(value, str):
                raise InvalidInput(f"Facet setting '{name}' must be a string, got {type(value).__name__}")
        return cls(
            facet=(instance.get("facet") or "").strip(),
            title=instance.get("title") or "",
            order_config=OrderConfig.build(instance.get("orderby"), instance.get("order")),
            match_type="any" if instance.get("match_type") == "any" else "all",
        )


@dataclass(frozen=True)
class FacetNode:
    """
    One renderable entry of a facet.
    """
    slug: str
    name: str
    count: int
    level: int
    selected: bool

    def to_dict(self):
        return {
            "slug": self.slug,
            "name": self.name,
            "count": self.count,
            "level": self.level,
            "selected": self.selected,
        }


@dataclass(frozen=True)
class FacetResult:
    """
    The ordered terms of a facet along with what the presentation layer needs around them.
    """
    title: str
    taxonomy: str
    match_type: str
    selected_terms: Tuple[str, ...]
    terms: Tuple[FacetNode, ...]

    def to_dict(self):
        return {
            "title": self.title,
            "taxonomy": self.taxonomy,
            "match_type": self.match_type,
            "selected_terms": list(self.selected_terms),
            "terms": [node.to_dict() for node in self.terms],
        }
