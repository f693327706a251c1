""" Abstract TermSource with factory method """

from django.conf import settings

from .dataclasses import Term
from .exceptions import InvalidInput
from .utils import _load_class


class TermSource:
    """
    Base abstract TermSource object.

    Wraps the taxonomy store. Users of this app will override this class and
    update the FACETS_TERM_SOURCE setting.
    """

    def has_taxonomy(self, taxonomy):
        """
        Whether the taxonomy is known to the store.
        """
        raise NotImplementedError

    def get_terms(self, taxonomy, hide_empty=True, lang=None):
        """
        Return the terms of the taxonomy in store order.

        `lang` names the language the terms are wanted in; it is passed
        explicitly, the source must not depend on an ambient active language.
        """
        raise NotImplementedError

    def get_term_by_id(self, term_id, taxonomy, lang=None):
        """
        Return a single Term, or None when there is no such term.
        """
        raise NotImplementedError

    def get_translated_term_id(self, term_id, taxonomy, lang):
        """
        Return the id of the term translating term_id into lang. The base store has no translations.
        """
        return None

    @staticmethod
    def get_term_source():
        """
        Returns the desired implementor (defined in settings).
        """
        term_source_class = _load_class(getattr(settings, "FACETS_TERM_SOURCE", None), StaticTermSource)
        return term_source_class()


def _term_from_record(record):
    return Term(
        id=record["id"],
        slug=record["slug"],
        name=record.get("name", record["slug"]),
        parent_id=record.get("parent") or None,
    )


class StaticTermSource(TermSource):
    """
    Serves the terms held in the FACETS_TAXONOMIES setting.

    FACETS_TAXONOMIES = {
        "category": [
            {"id": 1, "slug": "clothing", "name": "Clothing", "count": 12},
            {"id": 2, "slug": "shirts", "name": "Shirts", "parent": 1, "count": 4},
        ],
    }

    `count` is the number of objects the store has filed under the term; it only
    drives `hide_empty`. Translated records carry a `lang` and a `translation_of`
    id and are only returned when that language is asked for.
    """

    @staticmethod
    def _records(taxonomy):
        return getattr(settings, "FACETS_TAXONOMIES", {}).get(taxonomy)

    def has_taxonomy(self, taxonomy):
        return self._records(taxonomy) is not None

    def get_terms(self, taxonomy, hide_empty=True, lang=None):
        records = self._records(taxonomy)
        if records is None:
            raise InvalidInput(f"Unknown taxonomy '{taxonomy}'")

        terms = []
        for record in records:
            if record.get("lang") != lang and record.get("lang") is not None:
                continue
            if hide_empty and not record.get("count", 1):
                continue
            terms.append(_term_from_record(record))
        return terms

    def get_term_by_id(self, term_id, taxonomy, lang=None):
        for record in self._records(taxonomy) or []:
            if record["id"] == term_id:
                return _term_from_record(record)
        return None

    def get_translated_term_id(self, term_id, taxonomy, lang):
        """ id of the record that translates term_id into lang, if any """
        for record in self._records(taxonomy) or []:
            if record.get("lang") == lang and record.get("translation_of") == term_id:
                return record["id"]
        return None
