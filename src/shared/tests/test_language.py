from django.conf import settings
from django.test import RequestFactory, SimpleTestCase, TestCase, override_settings

from src.shared.context_processors import site_contact
from src.shared.i18n import localized
from src.shared.views import _normalize_path_for_lang


class SetLanguageTests(TestCase):
    def test_redirects_into_locale_tree_and_sets_cookie(self):
        response = self.client.get("/lang/", {"language": "en", "next": "/es/propiedades/"})
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response["Location"], "/en/propiedades/")
        self.assertEqual(response.cookies[settings.LANGUAGE_COOKIE_NAME].value, "en")

    def test_unknown_language_falls_back_to_default(self):
        response = self.client.get("/lang/", {"language": "fr", "next": "/"})
        self.assertEqual(response["Location"], "/es/")

    def test_external_next_is_ignored(self):
        response = self.client.get("/lang/", {"language": "en", "next": "https://evil.example.com/"})
        self.assertEqual(response["Location"], "/en/")

    def test_query_string_sets_cookie(self):
        response = self.client.get("/api/properties/", {"lang": "en"})
        self.assertEqual(response.cookies[settings.LANGUAGE_COOKIE_NAME].value, "en")


class LanguageHelperTests(SimpleTestCase):
    def test_dashboard_paths_stay_unlocalized(self):
        self.assertEqual(_normalize_path_for_lang("/dashboard/rooms", "en", ["es", "en"]), "/dashboard/rooms")
        self.assertEqual(_normalize_path_for_lang("/es", "en", ["es", "en"]), "/en/")

    def test_localized_falls_back_to_spanish(self):
        class Item:
            name_es = "Casa"
            name_en = ""

        self.assertEqual(localized(Item(), "name", "en"), "Casa")
        self.assertEqual(localized(Item(), "name", "es"), "Casa")

    @override_settings(CONTACT_EMAIL="hola@example.com", CONTACT_PHONE="+52 222", CONTACT_WHATSAPP="52222")
    def test_site_contact(self):
        ctx = site_contact(RequestFactory().get("/"))
        self.assertEqual(ctx["site_contact"]["email"], "hola@example.com")
        self.assertEqual(ctx["site_contact"]["whatsapp"], "52222")
