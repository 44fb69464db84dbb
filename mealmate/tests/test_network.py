import unittest
from unittest import mock
from mealmate.utilities import network


class TestLanUrl(unittest.TestCase):

    def test_lan_ip_gives_url(self):
        with mock.patch.object(network, 'get_local_ip', return_value='192.168.1.20'):
            self.assertEqual(network.get_lan_url(8000), 'http://192.168.1.20:8000')

    def test_loopback_gives_none(self):
        for ip in ('127.0.0.1', 'localhost'):
            with mock.patch.object(network, 'get_local_ip', return_value=ip):
                self.assertIsNone(network.get_lan_url(8000))

    def test_similar_address_is_not_loopback(self):
        # Only an exact loopback address is suppressed
        with mock.patch.object(network, 'get_local_ip', return_value='10.127.0.1'):
            self.assertEqual(network.get_lan_url(9000), 'http://10.127.0.1:9000')

    def test_socket_error_falls_back_to_loopback(self):
        fake = mock.MagicMock()
        fake.connect.side_effect = OSError("network unreachable")
        with mock.patch.object(network.socket, 'socket', return_value=fake):
            self.assertEqual(network.get_local_ip(), '127.0.0.1')
        fake.close.assert_called_once()
