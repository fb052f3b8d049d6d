"""Unit tests for credentials.py module."""
from __future__ import annotations

import unittest
from unittest.mock import MagicMock

from textpolisher.credentials import (
    PLACEHOLDER_API_KEY,
    ConfigCredentialStore,
    StaticCredentialStore,
    is_usable_credential,
)


class TestCredentials(unittest.TestCase):

    def test_usable_credential(self):
        self.assertTrue(is_usable_credential("sk-real"))

    def test_absent_credentials(self):
        for value in (None, "", "   ", PLACEHOLDER_API_KEY):
            with self.subTest(value=value):
                self.assertFalse(is_usable_credential(value))

    def test_static_store(self):
        store = StaticCredentialStore("sk-real")
        self.assertEqual(store.get(), "sk-real")
        self.assertTrue(store.is_present())
        self.assertFalse(StaticCredentialStore().is_present())

    def test_static_store_repr_hides_key(self):
        self.assertNotIn("sk-real", repr(StaticCredentialStore("sk-real")))

    def test_config_store_reads_on_every_call(self):
        config = MagicMock()
        config.get_api_key.side_effect = [None, "sk-new"]
        store = ConfigCredentialStore(config)

        self.assertFalse(store.is_present())
        self.assertTrue(store.is_present())


if __name__ == '__main__':
    unittest.main()
