""" Tests for resolving term names into the requested language """

from unittest.mock import Mock, patch

from django.test import TestCase
from django.test.utils import override_settings
from waffle.testutils import override_switch

from facets.dataclasses import Term
from facets.localization import (
    DISABLE_TERM_TRANSLATION_SWITCH,
    LocalizationContext,
    TermTranslator,
    resolve_names,
)

from .mock_term_source import MockTermSource
from .utils import make_counted


class BrokenTranslator(TermTranslator):
    """ Translator whose lookups blow up """

    def resolve_translated_term_id(self, term_id, taxonomy, target_language):
        raise RuntimeError("translation service down")


class LocalizationContextTest(TestCase):
    """ Tests for LocalizationContext """

    def test_single_language(self):
        self.assertFalse(LocalizationContext().needs_translation)
        self.assertFalse(LocalizationContext(language="en").needs_translation)

    def test_same_language(self):
        self.assertFalse(LocalizationContext(base_language="sq", language="sq").needs_translation)

    def test_other_language(self):
        context = LocalizationContext(base_language="sq", language="en")
        self.assertTrue(context.multilingual)
        self.assertTrue(context.needs_translation)

    def test_no_requested_language(self):
        self.assertFalse(LocalizationContext(base_language="sq").needs_translation)

    @override_settings(FACETS_BASE_LANGUAGE="sq")
    def test_for_language(self):
        self.assertEqual(LocalizationContext.for_language("en"), LocalizationContext("sq", "en"))

    @override_settings(FACETS_BASE_LANGUAGE=None)
    def test_for_language_single_language_site(self):
        self.assertFalse(LocalizationContext.for_language("en").multilingual)


class ResolveNamesTest(TestCase):
    """ Tests for resolve_names """

    def setUp(self):
        super().setUp()
        MockTermSource.destroy()
        self.terms = make_counted(("kuq", 5), ("blu", 0), ("gjelber", 3))
        MockTermSource.load("color", self.terms)
        MockTermSource.add_translation("color", 1, "en", Term(id=101, slug="red", name="Red"))
        MockTermSource.add_translation("color", 3, "en", Term(id=103, slug="green", name="Green"))
        self.translator = TermTranslator(MockTermSource())
        self.context = LocalizationContext(base_language="sq", language="en")

    def tearDown(self):
        MockTermSource.destroy()
        super().tearDown()

    def test_translates_names(self):
        resolved = resolve_names(self.terms, "color", self.context, self.translator)
        self.assertEqual([term.name for term in resolved], ["Red", "Blu", "Green"])

    def test_identity_fields_untouched(self):
        resolved = resolve_names(self.terms, "color", self.context, self.translator)
        for original, term in zip(self.terms, resolved):
            self.assertEqual((term.id, term.slug, term.count, term.level), (original.id, original.slug,
                                                                             original.count, original.level))

    def test_missing_translation_keeps_name(self):
        """ term 2 has no "en" counterpart """
        resolved = resolve_names(self.terms, "color", self.context, self.translator)
        self.assertEqual(resolved[1], self.terms[1])

    def test_missing_translated_term_keeps_name(self):
        translator = TermTranslator(MockTermSource())
        translator.get_term_by_id = Mock(return_value=None)
        resolved = resolve_names(self.terms, "color", self.context, translator)
        self.assertEqual(resolved, self.terms)

    def test_unknown_language(self):
        context = LocalizationContext(base_language="sq", language="fr")
        self.assertEqual(resolve_names(self.terms, "color", context, self.translator), self.terms)

    def test_base_language_untouched(self):
        translator = Mock()
        context = LocalizationContext(base_language="sq", language="sq")
        self.assertEqual(resolve_names(self.terms, "color", context, translator), self.terms)
        translator.translated_name.assert_not_called()

    def test_single_language_untouched(self):
        translator = Mock()
        self.assertEqual(resolve_names(self.terms, "color", LocalizationContext(), translator), self.terms)
        translator.translated_name.assert_not_called()

    def test_broken_translator_keeps_names(self):
        with patch("facets.localization.log") as mock_log:
            resolved = resolve_names(self.terms, "color", self.context, BrokenTranslator(MockTermSource()))
        self.assertEqual(resolved, self.terms)
        self.assertEqual(mock_log.exception.call_count, 3)

    @override_switch(DISABLE_TERM_TRANSLATION_SWITCH, active=True)
    def test_switch_disables_translation(self):
        self.assertEqual(resolve_names(self.terms, "color", self.context, self.translator), self.terms)

    def test_input_not_modified(self):
        names = [term.name for term in self.terms]
        resolve_names(self.terms, "color", self.context, self.translator)
        self.assertEqual([term.name for term in self.terms], names)

    @override_settings(FACETS_TRANSLATOR="facets.tests.test_localization.BrokenTranslator")
    def test_get_translator(self):
        source = MockTermSource()
        translator = TermTranslator.get_translator(source)
        self.assertIsInstance(translator, BrokenTranslator)
        self.assertIs(translator.term_source, source)

    def test_default_translator(self):
        self.assertIs(type(TermTranslator.get_translator(MockTermSource())), TermTranslator)
