import json
import unittest

from address_weather.domain import ForecastResult
from address_weather.formatter import NOT_FOUND_RESPONSE, format_result


class TestFormatter(unittest.TestCase):
    def test_embeds_payload_verbatim(self):
        payload = '{"type": "Feature", "properties": {"periods": [{"number": 1}]}}'
        rendered = format_result(ForecastResult(payload=payload, cached=True))

        self.assertEqual(rendered, '{ "forecast": ' + payload + ', "cached": true }')
        self.assertEqual(json.loads(rendered)["forecast"]["properties"]["periods"][0]["number"], 1)

    def test_cache_miss_flag(self):
        rendered = format_result(ForecastResult(payload="{}", cached=False))
        self.assertEqual(json.loads(rendered), {"forecast": {}, "cached": False})

    def test_not_found_document(self):
        self.assertEqual(
            json.loads(NOT_FOUND_RESPONSE),
            {"success": False, "message": "Forecast not found for the provided address."},
        )

    def test_refuses_not_found_result(self):
        with self.assertRaises(ValueError):
            format_result(ForecastResult.not_found())


if __name__ == "__main__":
    unittest.main()
