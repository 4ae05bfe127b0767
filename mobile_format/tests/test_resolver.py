from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings

from mobile_format.resolver import FallbackResolver, split_format, template_names_for
from mobile_format.tests.factories import MobileConfigFactory


class TestSplitFormat(SimpleTestCase):
    def test_split(self):
        self.assertEqual(split_format("blog/post.html"), ("blog/post", "html"))
        self.assertEqual(split_format("post.mobile"), ("post", "mobile"))

    def test_without_extension(self):
        self.assertEqual(split_format("blog/post"), ("blog/post", None))

    def test_dotted_directory(self):
        self.assertEqual(split_format("v1.2/post"), ("v1.2/post", None))
        self.assertEqual(split_format("v1.2/post.html"), ("v1.2/post", "html"))

    def test_hidden_file(self):
        self.assertEqual(split_format("blog/.hidden"), ("blog/.hidden", None))


class TestFallbackResolver(SimpleTestCase):
    def test_mobile_with_fallback(self):
        resolver = FallbackResolver()
        self.assertEqual(
            resolver.template_names("blog/post.html", "mobile"),
            ["blog/post.mobile", "blog/post.html"],
        )

    def test_mobile_without_fallback(self):
        resolver = FallbackResolver(None)
        self.assertEqual(
            resolver.template_names("blog/post.html", "mobile"), ["blog/post.mobile"]
        )

    def test_false_disables_fallback(self):
        self.assertIsNone(FallbackResolver(False).fall_back)

    def test_other_fallback_format(self):
        resolver = FallbackResolver("txt")
        self.assertEqual(
            resolver.template_names("notes/list.html", "mobile"),
            ["notes/list.mobile", "notes/list.txt"],
        )

    def test_use_fallback(self):
        resolver = FallbackResolver()
        resolver.use_fallback("xml")
        self.assertEqual(resolver.formats_for("mobile"), ["mobile", "xml"])
        resolver.use_fallback(None)
        self.assertEqual(resolver.formats_for("mobile"), ["mobile"])

    def test_other_formats_untouched(self):
        resolver = FallbackResolver()
        self.assertEqual(
            resolver.template_names("blog/post.html", "html"), ["blog/post.html"]
        )
        self.assertEqual(
            resolver.template_names(["a.html", "b.html"], "json"), ["a.html", "b.html"]
        )

    def test_sequence_keeps_order_and_drops_duplicates(self):
        resolver = FallbackResolver()
        self.assertEqual(
            resolver.template_names(
                ["blog/post.html", "post.html", "blog/post"], "mobile"
            ),
            ["blog/post.mobile", "blog/post.html", "post.mobile", "post.html"],
        )

    def test_resolving_twice_is_a_noop(self):
        resolver = FallbackResolver()
        names = resolver.template_names("blog/post.html", "mobile")
        self.assertEqual(resolver.template_names(names, "mobile"), names)

    def test_invalid_fallback(self):
        with self.assertRaises(ImproperlyConfigured):
            FallbackResolver("mobile")
        with self.assertRaises(ImproperlyConfigured):
            FallbackResolver(3)


class TestTemplateNamesFor(SimpleTestCase):
    def test_uses_request_config(self):
        request = type("Request", (), {})()
        request.format = "mobile"
        request.mobile_config = MobileConfigFactory(fall_back=None)
        self.assertEqual(template_names_for(request, "post.html"), ["post.mobile"])

    @override_settings(MOBILE_FORMAT={"FALL_BACK": "txt"})
    def test_falls_back_to_settings(self):
        request = type("Request", (), {})()
        request.format = "mobile"
        self.assertEqual(
            template_names_for(request, "post.html"), ["post.mobile", "post.txt"]
        )

    def test_request_without_format(self):
        request = type("Request", (), {})()
        self.assertEqual(template_names_for(request, "post.html"), ["post.html"])
