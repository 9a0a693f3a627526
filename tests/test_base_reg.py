from __future__ import annotations

import unittest

from vcollayers.reg.base_reg import RegisterBase


class TestRegisterBase(unittest.TestCase):

    def setUp(self):
        self._saved = list(RegisterBase._registry)
        RegisterBase._registry.clear()

    def tearDown(self):
        RegisterBase._registry[:] = self._saved

    def test_register_order(self):
        calls = []

        class First(RegisterBase):
            @classmethod
            def register(cls):
                calls.append("first+")

            @classmethod
            def unregister(cls):
                calls.append("first-")

        class Second(RegisterBase):
            @classmethod
            def register(cls):
                calls.append("second+")

            @classmethod
            def unregister(cls):
                calls.append("second-")

        self.assertEqual(RegisterBase.registered_classes(), (First, Second))
        RegisterBase.register_all()
        RegisterBase.unregister_all()
        self.assertEqual(calls, ["first+", "second+", "second-", "first-"])
