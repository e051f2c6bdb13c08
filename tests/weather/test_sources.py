# ABOUTME: Tests for NOAA buoy and tide prediction clients
# ABOUTME: Uses mocked responses to avoid real API calls in tests

from datetime import date, datetime, timezone
from unittest.mock import Mock, patch
from zoneinfo import ZoneInfo

import requests

from surf_almanac.tides.models import TidePrediction, TideSeries
from surf_almanac.weather.models import BuoyReading
from surf_almanac.weather.sources import (
    CoopsTideClient,
    NDBCBuoyClient,
    build_measurement,
    parse_ndbc_text,
)

LA = ZoneInfo("America/Los_Angeles")

NDBC_TEXT = """\
#YY  MM DD hh mm WDIR WSPD GST  WVHT   DPD   APD MWD   PRES  ATMP  WTMP  DEWP  VIS PTDY  TIDE
#yr  mo dy hr mn degT m/s  m/s     m   sec   sec degT   hPa  degC  degC  degC  nmi  hPa    ft
2025 10 16 14 50 320  5.0  7.0   1.5    14  10.2 290 1015.2  13.2  13.9  11.1   MM   MM    MM
2025 10 16 14 40 310  4.0  6.0    MM    MM    MM  MM 1015.3  13.1  13.9  11.0   MM   MM    MM
2025 10 16 14 20  MM   MM   MM   1.2    12   9.8 285 1015.4    MM    MM  11.0   MM   MM    MM
"""


class TestNDBCParsing:
    """Parsing the realtime2 standard meteorological format"""

    def test_parses_and_converts_units(self):
        readings = parse_ndbc_text("46026", NDBC_TEXT)
        latest = readings[0]

        assert latest.station_id == "46026"
        assert latest.timestamp_utc == datetime(2025, 10, 16, 14, 50, tzinfo=timezone.utc)
        assert latest.wave_height_ft == 4.9
        assert latest.wave_period_s == 14
        assert latest.wave_direction == 290
        assert latest.wind_speed_mph == 11.2
        assert latest.wind_direction == 320
        assert latest.water_temp_f == 57
        assert latest.air_temp_f == 56

    def test_skips_rows_without_waves(self):
        readings = parse_ndbc_text("46026", NDBC_TEXT)
        assert len(readings) == 2

    def test_missing_wind_and_temps(self):
        reading = parse_ndbc_text("46026", NDBC_TEXT)[1]

        assert reading.wind_speed_mph == 0.0
        assert reading.wind_direction == 0.0
        assert reading.water_temp_f is None
        assert reading.air_temp_f is None

    def test_header_only_file(self):
        assert parse_ndbc_text("46026", "#YY MM DD\n#yr mo dy\n") == []


class TestNDBCBuoyClient:
    """Fetching buoy observations over HTTP"""

    def test_fetch_latest(self):
        with patch('requests.get') as mock_get:
            mock_get.return_value.status_code = 200
            mock_get.return_value.text = NDBC_TEXT

            client = NDBCBuoyClient(base_url="https://example.test/realtime2")
            reading = client.fetch_latest("46026")

            assert reading.wave_height_ft == 4.9
            assert mock_get.call_args[0][0] == "https://example.test/realtime2/46026.txt"

    def test_http_error_returns_empty(self):
        with patch('requests.get') as mock_get:
            mock_get.return_value.status_code = 404

            assert NDBCBuoyClient().fetch("46026") == []
            assert NDBCBuoyClient().fetch_latest("46026") is None

    def test_network_error_returns_empty(self):
        with patch('requests.get', side_effect=requests.ConnectionError("offline")):
            assert NDBCBuoyClient().fetch("46026") == []

    def test_fetch_many_maps_failures_to_none(self):
        ok = Mock(status_code=200, text=NDBC_TEXT)
        down = Mock(status_code=503)

        with patch('requests.get', side_effect=[ok, down]):
            readings = NDBCBuoyClient().fetch_many(["46026", "46012"])

        assert readings["46026"].wave_period_s == 14
        assert readings["46012"] is None


HILO_RESPONSE = {
    "predictions": [
        {"t": "2025-10-16 05:42", "v": "5.123", "type": "H"},
        {"t": "2025-10-16 12:10", "v": "-0.412", "type": "L"},
    ]
}

HOURLY_RESPONSE = {
    "predictions": [
        {"t": "2025-10-16 00:00", "v": "3.100"},
        {"t": "2025-10-16 01:00", "v": "3.600"},
    ]
}


class TestCoopsTideClient:
    """Fetching tide predictions"""

    def test_fetch_builds_series(self):
        with patch('requests.get') as mock_get:
            mock_get.return_value.status_code = 200
            mock_get.return_value.json.side_effect = [HILO_RESPONSE, HOURLY_RESPONSE]

            client = CoopsTideClient(tz="America/Los_Angeles")
            series = client.fetch("9414290", date(2025, 10, 16))

            assert [p.height for p in series.high_low] == [5.123, -0.412]
            assert [p.type for p in series.high_low] == ["H", "L"]
            assert series.high_low[0].time == datetime(2025, 10, 16, 5, 42, tzinfo=LA)
            assert [p.height for p in series.hourly] == [3.1, 3.6]
            assert all(p.type is None for p in series.hourly)

            intervals = [c.kwargs["params"]["interval"] for c in mock_get.call_args_list]
            assert intervals == ["hilo", "h"]

    def test_date_range_params(self):
        with patch('requests.get') as mock_get:
            mock_get.return_value.status_code = 200
            mock_get.return_value.json.side_effect = [HILO_RESPONSE, HOURLY_RESPONSE]

            CoopsTideClient().fetch("9414290", date(2025, 10, 16), days=7)

            params = mock_get.call_args.kwargs["params"]
            assert params["begin_date"] == "20251016"
            assert params["end_date"] == "20251022"
            assert params["datum"] == "MLLW"

    def test_api_error_returns_none(self):
        with patch('requests.get') as mock_get:
            mock_get.return_value.status_code = 200
            mock_get.return_value.json.return_value = {
                "error": {"message": "No Predictions data was found."}
            }

            assert CoopsTideClient().fetch("0000000", date(2025, 10, 16)) is None

    def test_http_error_returns_none(self):
        with patch('requests.get') as mock_get:
            mock_get.return_value.status_code = 500

            assert CoopsTideClient().fetch("9414290", date(2025, 10, 16)) is None

    def test_malformed_payload_returns_none(self):
        with patch('requests.get') as mock_get:
            mock_get.return_value.status_code = 200
            mock_get.return_value.json.return_value = {"predictions": [{"t": "yesterday"}]}

            assert CoopsTideClient().fetch("9414290", date(2025, 10, 16)) is None


def make_reading() -> BuoyReading:
    return BuoyReading(
        station_id="46026",
        timestamp_utc=datetime(2025, 10, 16, 14, 50, tzinfo=timezone.utc),
        wave_height_ft=4.9,
        wave_period_s=14,
        wave_direction=290,
        wind_speed_mph=11.2,
        wind_direction=320,
        water_temp_f=57,
    )


def test_build_measurement_uses_tide_state():
    tides = TideSeries(
        hourly=(
            TidePrediction(datetime(2025, 10, 16, 8, tzinfo=LA), 2.0),
            TidePrediction(datetime(2025, 10, 16, 9, tzinfo=LA), 3.0),
        ),
        high_low=(TidePrediction(datetime(2025, 10, 16, 5, 42, tzinfo=LA), 1.0, "L"),),
    )

    measurement = build_measurement(make_reading(), tides, datetime(2025, 10, 16, 8, 30, tzinfo=LA))

    assert measurement.wave_height_ft == 4.9
    assert measurement.swell_direction == 290
    assert measurement.tide_height_ft == 2.5
    assert measurement.tide_phase == "rising"
    assert measurement.water_temp_f == 57


def test_build_measurement_without_tides():
    measurement = build_measurement(make_reading(), None, datetime(2025, 10, 16, 8, tzinfo=LA))

    assert measurement.tide_height_ft == 0.0
    assert measurement.tide_phase == "rising"
