from django.test import RequestFactory, SimpleTestCase

from recipes.utils.http import client_address, user_agent


class ClientAddressTestCase(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_first_forwarded_hop_wins(self):
        request = self.factory.get("/", HTTP_X_FORWARDED_FOR="203.0.113.7, 10.0.0.1", REMOTE_ADDR="10.0.0.2")
        self.assertEqual(client_address(request), "203.0.113.7")

    def test_remote_addr_fallback(self):
        request = self.factory.get("/", REMOTE_ADDR="10.0.0.2")
        self.assertEqual(client_address(request), "10.0.0.2")

    def test_unknown_when_nothing_available(self):
        request = self.factory.get("/")
        request.META.pop("REMOTE_ADDR", None)
        self.assertEqual(client_address(request), "unknown")

    def test_user_agent(self):
        self.assertEqual(user_agent(self.factory.get("/", HTTP_USER_AGENT="curl/8")), "curl/8")
        self.assertEqual(user_agent(self.factory.get("/")), "unknown")
