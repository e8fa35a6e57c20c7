"""
Tests for response decoding and error mapping.
"""

import json
import unittest

from robot.client import RobotClient, decode_result
from robot.config import RobotConfig
from robot.errors import ApiError, NOT_REACHABLE, RESPONSE_DECODE_ERROR
from robot.transport import RawResult

from fake_transport import FakeTransport


FAILOVER_BODY = (
    '{"failover":{"ip":"1.2.3.4","server_ip":"5.6.7.8",'
    '"active_server_ip":"5.6.7.8"}}'
)


class TestDecodeResult(unittest.TestCase):
    """
    Test the decode/validate step shared by every operation.
    """

    def test_structured_error_for_every_error_status(self):
        """Status 400-503 with an error object raises its message and code."""
        body = json.dumps({"error": {"message": "server not found", "code": "SERVER_NOT_FOUND"}})
        for status in range(400, 504):
            with self.subTest(status=status):
                with self.assertRaises(ApiError) as ctx:
                    decode_result(RawResult(status, body))
                self.assertEqual(ctx.exception.message, "server not found")
                self.assertEqual(ctx.exception.code, "SERVER_NOT_FOUND")

    def test_unstructured_error_for_every_error_status(self):
        """Status 400-503 without an error object raises the bare status."""
        for status in range(400, 504):
            for body in ('{"foo": "bar"}', '[1, 2]', '', '{"error": "oops"}',
                         '{"error": {"message": "no code"}}'):
                with self.subTest(status=status, body=body):
                    with self.assertRaises(ApiError) as ctx:
                        decode_result(RawResult(status, body))
                    self.assertIsNone(ctx.exception.message)
                    self.assertEqual(ctx.exception.code, status)

    def test_success_returns_parsed_value(self):
        self.assertEqual(decode_result(RawResult(200, '{"a": [1, 2, {"b": null}]}')),
                         {"a": [1, 2, {"b": None}]})
        self.assertEqual(decode_result(RawResult(201, '[{"ip": "1.2.3.4"}]')),
                         [{"ip": "1.2.3.4"}])

    def test_status_outside_error_range_is_success(self):
        for status in (200, 204, 302, 399, 504, 599):
            with self.subTest(status=status):
                self.assertEqual(decode_result(RawResult(status, '{"ok": true}')), {"ok": True})

    def test_empty_body_is_empty_object(self):
        self.assertEqual(decode_result(RawResult(200, "")), {})

    def test_not_reachable(self):
        """No response obtained yields NOT_REACHABLE whatever the status."""
        for status in (0, 200, 404, 500):
            with self.subTest(status=status):
                with self.assertRaises(ApiError) as ctx:
                    decode_result(RawResult(status, None))
                self.assertEqual(ctx.exception.code, NOT_REACHABLE)
                self.assertEqual(ctx.exception.message, "not reachable")

    def test_null_body_is_decode_error(self):
        with self.assertRaises(ApiError) as ctx:
            decode_result(RawResult(200, "null"))
        self.assertEqual(ctx.exception.code, RESPONSE_DECODE_ERROR)
        self.assertEqual(ctx.exception.message, "response can not be decoded")

    def test_malformed_body_is_decode_error(self):
        for body in ("{not json", "<html>502 Bad Gateway</html>", '{"a": 1'):
            with self.subTest(body=body):
                with self.assertRaises(ApiError) as ctx:
                    decode_result(RawResult(200, body))
                self.assertEqual(ctx.exception.code, RESPONSE_DECODE_ERROR)

    def test_non_standard_constants_are_decode_error(self):
        for body in ("NaN", "Infinity", "-Infinity", '{"traffic": NaN}'):
            with self.subTest(body=body):
                with self.assertRaises(ApiError) as ctx:
                    decode_result(RawResult(200, body))
                self.assertEqual(ctx.exception.code, RESPONSE_DECODE_ERROR)

    def test_malformed_body_wins_over_error_status(self):
        with self.assertRaises(ApiError) as ctx:
            decode_result(RawResult(500, "Internal Server Error"))
        self.assertEqual(ctx.exception.code, RESPONSE_DECODE_ERROR)

    def test_error_str(self):
        self.assertEqual(str(ApiError("failover not found", "FAILOVER_NOT_FOUND")),
                         "FAILOVER_NOT_FOUND: failover not found")
        self.assertEqual(str(ApiError(None, 404)), "404")


class TestFailoverScenarios(unittest.TestCase):
    """
    End to end through the client with a fake transport.
    """

    def setUp(self):
        self.config = RobotConfig(
            base_url="https://robot-ws.your-server.de",
            username="robot",
            password="secret",
        )

    def test_failover_get_success(self):
        transport = FakeTransport(200, FAILOVER_BODY)
        client = RobotClient(self.config, transport=transport)

        result = client.failover_get("1.2.3.4")

        self.assertEqual(result["failover"]["ip"], "1.2.3.4")
        self.assertEqual(result["failover"]["server_ip"], "5.6.7.8")
        self.assertEqual(result["failover"]["active_server_ip"], "5.6.7.8")

    def test_failover_get_not_found(self):
        transport = FakeTransport(
            404,
            '{"error":{"message":"failover not found","code":"FAILOVER_NOT_FOUND"}}',
        )
        client = RobotClient(self.config, transport=transport)

        with self.assertRaises(ApiError) as ctx:
            client.failover_get("1.2.3.4")

        self.assertEqual(ctx.exception.message, "failover not found")
        self.assertEqual(ctx.exception.code, "FAILOVER_NOT_FOUND")

    def test_unreachable_robot(self):
        client = RobotClient(self.config, transport=FakeTransport(0, None))

        with self.assertRaises(ApiError) as ctx:
            client.server_get_all()

        self.assertEqual(ctx.exception.code, NOT_REACHABLE)


if __name__ == '__main__':
    unittest.main()
