from __future__ import annotations

import json

import pytest
from structlog.testing import capture_logs

from places_autocomplete import __main__ as cli


@pytest.mark.asyncio
async def test_main_prints_suggestions_for_last_query(monkeypatch, make_places, make_client, capsys, make_settings):
    places = make_places(make_client({"paris": ([{"description": "Paris"}], "OK")}))
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    monkeypatch.setattr(cli, "get_settings", lambda: make_settings(cache=False))
    monkeypatch.setattr(cli, "HttpPlacesLibrary", lambda client, settings: places)

    with capture_logs() as logs:
        await cli.main(["par", "pari", "paris"])

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"loading": False, "status": "OK", "data": [{"description": "Paris"}]}
    assert places.client.requests == [{"input": "paris"}]
    assert any(entry["event"] == "suggestions_received" for entry in logs)
