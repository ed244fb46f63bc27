"""ULID Routes — conversion and batch statistics over HTTP.

Invariants:
    - POST /12/ulids returns UUID strings in reverse order, invalid dropped
    - POST /12/ulids/{weekday} returns the four contract field names verbatim
    - Invalid weekday or malformed ULID → 400 envelope; non-integer weekday → 400
"""

ULIDS = [
    "01BJQ0E1C3Z56ABCD0E11HYX4M",
    "01BJQ0E1C3Z56ABCD0E11HYX5N",
    "01BJQ0E1C3Z56ABCD0E11HYX6Q",
    "01BJQ0E1C3Z56ABCD0E11HYX7R",
    "01BJQ0E1C3Z56ABCD0E11HYX8P",
]

STATS_BATCH = [
    "00WEGGF0G0J5HEYXS3D7RWZGV8",
    "76EP4G39R8JD1N8AQNYDVJBRCF",
    "018CJ7KMG0051CDCS3B7BFJ3AK",
    "00Y986KPG0AMGB78RD45E9109K",
    "010451HTG0NYWMPWCEXG6AJ8F2",
    "01HH9SJEG0KY16H81S3N1BMXM4",
    "01HH9SJEG0P9M22Z9VGHH9C8CX",
    "017F8YY0G0NQA16HHC2QT5JD6X",
    "03QCPC7P003V1NND3B3QJW72QJ",
]


async def test_ulids_to_uuids_reversed(client):
    res = await client.post("/12/ulids", json=ULIDS)
    assert res.status_code == 200
    assert res.json() == [
        "015cae07-0583-f94c-a5b1-a070431f7516",
        "015cae07-0583-f94c-a5b1-a070431f74f8",
        "015cae07-0583-f94c-a5b1-a070431f74d7",
        "015cae07-0583-f94c-a5b1-a070431f74b5",
        "015cae07-0583-f94c-a5b1-a070431f7494",
    ]


async def test_ulids_to_uuids_drops_invalid(client):
    res = await client.post("/12/ulids", json=["nope", ULIDS[0], "", ULIDS[1]])
    assert res.status_code == 200
    assert res.json() == [
        "015cae07-0583-f94c-a5b1-a070431f74b5",
        "015cae07-0583-f94c-a5b1-a070431f7494",
    ]


async def test_ulids_to_uuids_all_invalid_is_empty_list(client):
    res = await client.post("/12/ulids", json=["a", "b"])
    assert res.status_code == 200
    assert res.json() == []


async def test_ulids_body_must_be_array_of_strings(client):
    res = await client.post("/12/ulids", json={"ulids": ULIDS})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["fields"]


async def test_batch_stats_reference_response(client):
    res = await client.post("/12/ulids/5", json=STATS_BATCH)
    assert res.status_code == 200
    assert res.json() == {
        "christmas eve": 3,
        "weekday": 1,
        "in the future": 2,
        "LSB is 1": 5,
    }


async def test_batch_stats_invalid_weekday_returns_400(client):
    res = await client.post("/12/ulids/7", json=STATS_BATCH)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_WEEKDAY"


async def test_batch_stats_non_integer_weekday_returns_400(client):
    res = await client.post("/12/ulids/friday", json=STATS_BATCH)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["fields"]


async def test_batch_stats_malformed_ulid_returns_400(client):
    res = await client.post("/12/ulids/5", json=STATS_BATCH + ["garbage"])
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "MALFORMED_IDENTIFIER"
    assert error["context"]["index"] == len(STATS_BATCH)


async def test_batch_stats_every_weekday_succeeds(client):
    totals = 0
    for weekday in range(7):
        res = await client.post(f"/12/ulids/{weekday}", json=STATS_BATCH)
        assert res.status_code == 200
        body = res.json()
        assert body["LSB is 1"] == 5
        totals += body["weekday"]
    assert totals == len(STATS_BATCH)
