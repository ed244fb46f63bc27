"""Elapsed Routes — save/load round trip over HTTP with a fake monotonic clock.

Invariants:
    - POST /12/save/{key} returns 200 with an empty body
    - GET /12/load/{key} returns whole seconds as plain text
    - Unknown keys return 404 with the JSON error envelope
"""


async def test_save_returns_empty_200(client, store):
    res = await client.post("/12/save/packet20231212")
    assert res.status_code == 200
    assert res.content == b""
    assert "packet20231212" in store


async def test_load_unknown_key_returns_404(client):
    res = await client.get("/12/load/never-saved")
    assert res.status_code == 404
    body = res.json()
    assert body["error"]["code"] == "KEY_NOT_FOUND"
    assert body["error"]["context"]["key"] == "never-saved"


async def test_save_wait_load_resave_scenario(client, fake_clock):
    await client.post("/12/save/packet20231212")
    fake_clock.advance(2)
    res = await client.get("/12/load/packet20231212")
    assert res.status_code == 200
    assert res.text == "2"
    assert res.headers["content-type"].startswith("text/plain")

    fake_clock.advance(2)
    res = await client.get("/12/load/packet20231212")
    assert res.text == "4"

    await client.post("/12/save/packet20231212")
    res = await client.get("/12/load/packet20231212")
    assert res.text == "0"


async def test_load_right_after_save_is_zero(client):
    await client.post("/12/save/fresh")
    res = await client.get("/12/load/fresh")
    assert res.text == "0"


async def test_load_on_get_only(client):
    res = await client.post("/12/load/packet")
    assert res.status_code == 405
