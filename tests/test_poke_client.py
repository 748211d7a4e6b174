import asyncio

import pytest
import requests

from src import FetchError, PokeClient
from src import utils


@pytest.fixture
def captured(monkeypatch):
    calls = []
    responses = {}

    # requests.Session.request is an instance method, so the fake must accept `self` first
    def fake_request(self, method, url, **kwargs):
        calls.append({"method": method, "url": url, "kwargs": kwargs})
        if url in responses:
            return responses[url]
        return utils.make_response_json({"name": "x", "results": []})

    monkeypatch.setattr("requests.Session.request", fake_request)
    return calls, responses


def test_entity_accessors_build_urls(captured):
    calls, _ = captured
    client = PokeClient()

    async def go():
        await client.get_pokemon(25)
        await client.get_type("fire")
        await client.get_species(3)
        await client.get_ability("stench")
        await client.get_generation(1)

    asyncio.run(go())
    assert [c["url"] for c in calls] == [
        "https://pokeapi.co/api/v2/pokemon/25",
        "https://pokeapi.co/api/v2/type/fire",
        "https://pokeapi.co/api/v2/pokemon-species/3",
        "https://pokeapi.co/api/v2/ability/stench",
        "https://pokeapi.co/api/v2/generation/1",
    ]
    assert all(c["method"] == "GET" for c in calls)


def test_list_accessors_default_paging(captured):
    calls, _ = captured
    client = PokeClient(base_url="http://poke.local/api/v2/")

    async def go():
        await client.get_pokemons()
        await client.get_species_list(offset=40, limit=5)
        await client.get_abilities()
        await client.get_types()
        await client.get_generations()

    asyncio.run(go())
    assert [c["url"] for c in calls] == [
        "http://poke.local/api/v2/pokemon?offset=0&limit=20",
        "http://poke.local/api/v2/pokemon-species?offset=40&limit=5",
        "http://poke.local/api/v2/ability?offset=0&limit=20",
        "http://poke.local/api/v2/type",
        "http://poke.local/api/v2/generation",
    ]


def test_success_returns_parsed_body(captured):
    _, responses = captured
    page = {"count": 1, "next": None, "previous": None,
            "results": [{"name": "bulbasaur", "url": "https://pokeapi.co/api/v2/pokemon/1/"}]}
    responses["https://pokeapi.co/api/v2/pokemon?offset=0&limit=1"] = utils.make_response_json(page)

    result = asyncio.run(PokeClient().get_pokemons(limit=1))
    assert result == page


def test_non_success_status_raises_fetch_error(captured):
    _, responses = captured
    url = "https://pokeapi.co/api/v2/pokemon/99999"
    responses[url] = utils.make_response_json({}, status=404, reason="Not Found")

    with pytest.raises(FetchError) as info:
        asyncio.run(PokeClient().get_pokemon(99999))
    assert str(info.value) == "Failed to fetch Pokémon with ID 99999: Not Found"
    assert info.value.status_code == 404
    assert info.value.url == url


def test_list_error_message_names_its_own_resource(captured):
    _, responses = captured
    responses["https://pokeapi.co/api/v2/pokemon-species?offset=0&limit=20"] = utils.make_response_json(
        {}, status=500, reason="Internal Server Error")
    responses["https://pokeapi.co/api/v2/ability?offset=0&limit=20"] = utils.make_response_json(
        {}, status=503, reason="Service Unavailable")
    client = PokeClient()

    with pytest.raises(FetchError, match="species list: Internal Server Error"):
        asyncio.run(client.get_species_list())
    with pytest.raises(FetchError) as info:
        asyncio.run(client.get_abilities())
    assert "generations" not in str(info.value)
    assert "abilities" in str(info.value)


def test_malformed_body_propagates_decode_error(captured):
    _, responses = captured
    resp = requests.Response()
    resp.status_code = 200
    resp.reason = "OK"
    resp._content = b"<html>not json</html>"
    resp.encoding = "utf-8"
    responses["https://pokeapi.co/api/v2/type/3"] = resp

    with pytest.raises(ValueError):
        asyncio.run(PokeClient().get_type(3))


def test_timeout_is_passed_through(captured):
    calls, _ = captured
    asyncio.run(PokeClient(timeout=5).get_pokemon(1))
    assert calls[0]["kwargs"]["timeout"] == 5


def test_url_builders():
    client = PokeClient(base_url="http://h/api")
    assert client.resource_url("type") == "http://h/api/type"
    assert client.resource_url("type", 3) == "http://h/api/type/3"
    assert client.list_url("pokemon", 10, 5) == "http://h/api/pokemon?offset=10&limit=5"


def test_generic_get_error_names_url(captured):
    _, responses = captured
    url = "https://pokeapi.co/api/v2/move/0"
    responses[url] = utils.make_response_json({}, status=404, reason="Not Found")

    with pytest.raises(FetchError) as info:
        asyncio.run(PokeClient().get(url))
    assert str(info.value) == f"Failed to fetch {url}: Not Found"
