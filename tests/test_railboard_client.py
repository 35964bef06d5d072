"""Behavior-focused tests for the front end's client of the /api routes."""

from unittest.mock import AsyncMock

import httpx
import pytest

from app.clients.railboard_client import RailboardClient, RailboardError
from main import app
from tests.conftest import live_settings, offline_settings


def railboard_for(handler) -> RailboardClient:
    return RailboardClient(base_url="http://railboard.test", transport=httpx.MockTransport(handler))


def railboard_for_app() -> RailboardClient:
    return RailboardClient(base_url="http://railboard.test", transport=httpx.ASGITransport(app=app))


class TestFetchStationData:
    @pytest.mark.asyncio
    async def test_returns_station_data_from_mock_route(self, make_client) -> None:
        make_client(offline_settings())

        data = await railboard_for_app().fetch_station_data("bmh")

        assert data.location.crs == "BMH"
        assert data.services[0].atoc_name == "South Western Railway"

    @pytest.mark.asyncio
    async def test_when_server_reports_error_then_raises_its_message(self, make_client) -> None:
        def upstream(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("down", request=request)

        make_client(live_settings(), upstream=upstream)

        with pytest.raises(RailboardError) as excinfo:
            await railboard_for_app().fetch_station_data("BLY")

        assert str(excinfo.value) == "Network error: Unable to connect to the train data service."

    @pytest.mark.asyncio
    async def test_when_request_fails_without_body_then_default_message(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("down", request=request)

        with pytest.raises(RailboardError, match="Failed to fetch station data. Please try again."):
            await railboard_for(handler).fetch_station_data("BLY")

    @pytest.mark.asyncio
    async def test_when_station_blank_then_raises_without_request(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        with pytest.raises(RailboardError, match="Please enter a station code"):
            await railboard_for(handler).fetch_station_data("   ")


class TestFetchTrainDetails:
    @pytest.mark.asyncio
    async def test_returns_details_from_mock_route(self, make_client) -> None:
        make_client(offline_settings())

        details = await railboard_for_app().fetch_train_details("ANY123")

        assert details.service_uid == "ANY123"
        assert [s.tiploc for s in details.stops] == ["WATRLOO", "BOURNMTH", "WEYMTH"]

    @pytest.mark.asyncio
    async def test_when_404_then_not_found_message(self) -> None:
        handler = lambda r: httpx.Response(404, json={"error": "API error: 404 - Service not found"})

        with pytest.raises(RailboardError, match="Train service not found"):
            await railboard_for(handler).fetch_train_details("test-uid")

    @pytest.mark.asyncio
    async def test_when_other_status_then_server_message(self) -> None:
        handler = lambda r: httpx.Response(503, json={"error": "Network error: Unable to connect to the train data service."})

        with pytest.raises(RailboardError, match="^Network error"):
            await railboard_for(handler).fetch_train_details("test-uid")

    @pytest.mark.asyncio
    async def test_when_request_fails_then_default_message(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadError("reset", request=request)

        with pytest.raises(RailboardError, match="Failed to fetch train details. Please try again."):
            await railboard_for(handler).fetch_train_details("test-uid")


class TestFetchSuggestedStations:
    @pytest.mark.asyncio
    async def test_returns_suggestions(self, make_client) -> None:
        store = AsyncMock()
        store.search.return_value = [{"station_name": "Bletchley", "station_code": "BLY"}]
        make_client(
            offline_settings(suggestions_url="postgresql://stations.test/db", suggestions_key="k"),
            suggestions=store,
        )

        suggestions = await railboard_for_app().fetch_suggested_stations("bly")

        assert [(s.name, s.code) for s in suggestions] == [("Bletchley", "BLY")]

    @pytest.mark.asyncio
    async def test_when_store_lookup_throws_then_empty_list(self, make_client) -> None:
        store = AsyncMock()
        store.search.side_effect = OSError("could not connect")
        make_client(
            offline_settings(suggestions_url="postgresql://stations.test/db", suggestions_key="k"),
            suggestions=store,
        )

        assert await railboard_for_app().fetch_suggested_stations("bly") == []

    @pytest.mark.asyncio
    async def test_when_body_is_not_a_list_then_empty_list(self) -> None:
        handler = lambda r: httpx.Response(200, json={"unexpected": True})

        assert await railboard_for(handler).fetch_suggested_stations("bly") == []

    @pytest.mark.asyncio
    async def test_when_network_fails_then_empty_list(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("down", request=request)

        assert await railboard_for(handler).fetch_suggested_stations("bly") == []
