""" Resolve facet term names against the language the page is rendered in """

import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from waffle import switch_is_active  # lint-amnesty, pylint: disable=invalid-django-waffle-import

from .exceptions import TranslationMiss
from .utils import _load_class

log = logging.getLogger(__name__)

# .. toggle_name: facets.disable_term_translation
# .. toggle_implementation: WaffleSwitch
# .. toggle_default: False
# .. toggle_description: Render facet terms with their base language names even
#      when the page is requested in another language.
# .. toggle_use_cases: opt_out
DISABLE_TERM_TRANSLATION_SWITCH = "facets.disable_term_translation"


@dataclass(frozen=True)
class LocalizationContext:
    """
    The language terms are stored in, and the language the page was requested in.

    Passed explicitly through the pipeline in place of a global "current language".
    """
    base_language: Optional[str] = None
    language: Optional[str] = None

    @classmethod
    def for_language(cls, language):
        """ context for a request in `language`, against the configured base language """
        return cls(base_language=getattr(settings, "FACETS_BASE_LANGUAGE", None), language=language)

    @property
    def multilingual(self):
        return bool(self.base_language)

    @property
    def needs_translation(self):
        return self.multilingual and bool(self.language) and self.language != self.base_language


class TermTranslator:

    """
    Class to find the translated counterpart of a term.
    Users of this app will override this class and update setting for FACETS_TRANSLATOR

    The base implementation asks the term source.
    """

    def __init__(self, term_source):
        self.term_source = term_source

    def resolve_translated_term_id(self, term_id, taxonomy, target_language):
        """ id of the translated term, or None """
        return self.term_source.get_translated_term_id(term_id, taxonomy, target_language)

    def get_term_by_id(self, term_id, taxonomy, target_language):
        return self.term_source.get_term_by_id(term_id, taxonomy, lang=target_language)

    def translated_name(self, term, taxonomy, target_language):
        """
        Name of the term in target_language, raises TranslationMiss when there is none
        """
        translated_id = self.resolve_translated_term_id(term.id, taxonomy, target_language)
        if translated_id is None:
            raise TranslationMiss(f"No '{target_language}' translation for term {term.id}")
        translated = self.get_term_by_id(translated_id, taxonomy, target_language)
        if translated is None or not translated.name:
            raise TranslationMiss(f"Translated term {translated_id} of term {term.id} not found")
        return translated.name

    @classmethod
    def get_translator(cls, term_source):
        """
        Finds desired subclass (defined in settings)
        """
        return _load_class(getattr(settings, "FACETS_TRANSLATOR", None), cls)(term_source)


def _resolve_name(term, taxonomy, language, translator):
    try:
        return term.with_name(translator.translated_name(term, taxonomy, language))
    except TranslationMiss as miss:
        log.debug("Keeping base name for %s: %s", term.slug, miss)
    # protect around any problems introduced by translator subclasses
    except Exception:  # pylint: disable=broad-except
        log.exception("error translating term %s of %s into %s: keeping base name", term.slug, taxonomy, language)
    return term


def resolve_names(terms, taxonomy, context, translator):
    """
    Replace each term name with its translation when the page language differs
    from the base language. Terms without a translation keep their own name.
    """
    if not context.needs_translation:
        return tuple(terms)
    if switch_is_active(DISABLE_TERM_TRANSLATION_SWITCH):
        return tuple(terms)
    return tuple(_resolve_name(term, taxonomy, context.language, translator) for term in terms)
