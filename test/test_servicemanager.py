import logging
import sys
import types
import unittest
from unittest import mock

from greeter import servicemanager


def fake_systemd(**journal_attrs):
    systemd = types.ModuleType("systemd")
    systemd.daemon = types.ModuleType("systemd.daemon")
    systemd.daemon.notify = mock.Mock()
    systemd.daemon.Notification = types.SimpleNamespace(READY="<ready>")
    systemd.journal = types.ModuleType("systemd.journal")
    for name, value in journal_attrs.items():
        setattr(systemd.journal, name, value)
    return {
        "systemd": systemd,
        "systemd.daemon": systemd.daemon,
        "systemd.journal": systemd.journal,
    }


class TestServiceManager(unittest.TestCase):

    def setUp(self):
        patcher = mock.patch.multiple(servicemanager, _daemon=None, _journal=None)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_disabled(self):
        servicemanager.notify_ready()
        self.assertIsInstance(servicemanager.LogHandler(), logging.NullHandler)

    def test_official_bindings(self):
        handler = logging.Handler()
        modules = fake_systemd(JournalHandler=mock.Mock(return_value=handler))
        with mock.patch.dict(sys.modules, modules):
            servicemanager.enable()
        servicemanager.notify_ready()
        modules["systemd.daemon"].notify.assert_called_once_with("READY=1")
        self.assertIs(servicemanager.LogHandler(), handler)

    def test_mosquito_bindings(self):
        handler = logging.Handler()
        modules = fake_systemd(JournaldLogHandler=mock.Mock(return_value=handler))
        with mock.patch.dict(sys.modules, modules):
            servicemanager.enable()
        servicemanager.notify_ready()
        modules["systemd.daemon"].notify.assert_called_once_with("<ready>")
        self.assertIs(servicemanager.LogHandler(), handler)

    def test_unknown_bindings(self):
        with mock.patch.dict(sys.modules, fake_systemd()):
            servicemanager.enable()
        with self.assertRaises(AssertionError):
            servicemanager.notify_ready()
        with self.assertRaises(AssertionError):
            servicemanager.LogHandler()


if __name__ == '__main__':
    unittest.main()
