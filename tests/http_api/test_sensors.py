# tests/http_api/test_sensors.py
from uuid import uuid4


def test_create_sensor_defaults(client, create_address) -> None:
    site = create_address()

    resp = client.post(
        "/sensors",
        json={
            "code": "SOLAR-FARM-001",
            "equip_address_uuid": site["uuid"],
            "angle": 180.0,
            "power_generate": 850.5,
        },
    )

    assert resp.status_code == 201
    data = resp.json()
    assert data["code"] == "SOLAR-FARM-001"
    assert data["total_events"] == 0
    assert data["total_shutdown"] == 0
    assert data["last_shutdown"] is None
    assert data["angle"] == 180.0
    assert data["power_generate"] == 850.5
    assert data["location"]["uuid"] == site["uuid"]
    assert data["user"] is None
    assert data["events"] == []


def test_create_sensor_with_duplicate_code_is_409(client, create_sensor) -> None:
    sensor = create_sensor(code="SOLAR-HOME-001")

    resp = client.post(
        "/sensors",
        json={
            "code": "SOLAR-HOME-001",
            "equip_address_uuid": sensor["equip_address_uuid"],
            "angle": 45.0,
            "power_generate": 250.5,
        },
    )

    assert resp.status_code == 409
    assert resp.json()["detail"] == "Sensor with this code already exists"


def test_create_sensor_with_unknown_address_is_404(client) -> None:
    resp = client.post(
        "/sensors",
        json={
            "code": "SOLAR-X",
            "equip_address_uuid": str(uuid4()),
            "angle": 10.0,
            "power_generate": 100.0,
        },
    )
    assert resp.status_code == 404


def test_create_sensor_with_unknown_user_is_404(client, create_address) -> None:
    resp = client.post(
        "/sensors",
        json={
            "code": "SOLAR-X",
            "equip_address_uuid": create_address()["uuid"],
            "user_uuid": str(uuid4()),
            "angle": 10.0,
            "power_generate": 100.0,
        },
    )
    assert resp.status_code == 404


def test_create_sensor_angle_out_of_range_is_422(client, create_address) -> None:
    resp = client.post(
        "/sensors",
        json={
            "code": "SOLAR-X",
            "equip_address_uuid": create_address()["uuid"],
            "angle": 361,
            "power_generate": 100.0,
        },
    )
    assert resp.status_code == 422


def test_sensor_embeds_owner(client, create_user, create_sensor) -> None:
    user = create_user()
    sensor = create_sensor(user_uuid=user["uuid"])

    assert sensor["user"]["uuid"] == user["uuid"]
    owned = client.get(f"/users/{user['uuid']}").json()["sensors"]
    assert [s["uuid"] for s in owned] == [sensor["uuid"]]


def test_get_sensor_by_code(client, create_sensor) -> None:
    sensor = create_sensor(code="SOLAR-PANEL-A1")

    resp = client.get("/sensors/code/SOLAR-PANEL-A1")

    assert resp.status_code == 200
    assert resp.json()["uuid"] == sensor["uuid"]
    assert client.get("/sensors/code/SOLAR-PANEL-ZZ").status_code == 404


def test_list_sensors(client, create_sensor) -> None:
    create_sensor()
    create_sensor()

    resp = client.get("/sensors")

    assert resp.status_code == 200
    assert len(resp.json()) == 2


def test_patch_sensor(client, create_sensor) -> None:
    sensor = create_sensor(angle=30.0)

    resp = client.patch(f"/sensors/{sensor['uuid']}", json={"angle": 45.5})

    assert resp.status_code == 200
    assert resp.json()["angle"] == 45.5
    assert resp.json()["code"] == sensor["code"]


def test_patch_sensor_code_collision_is_409(client, create_sensor) -> None:
    create_sensor(code="A")
    sensor = create_sensor(code="B")

    resp = client.patch(f"/sensors/{sensor['uuid']}", json={"code": "A"})
    assert resp.status_code == 409


def test_patch_sensor_to_unknown_address_is_404(client, create_sensor) -> None:
    sensor = create_sensor()

    resp = client.patch(
        f"/sensors/{sensor['uuid']}",
        json={"equip_address_uuid": str(uuid4())},
    )
    assert resp.status_code == 404


def test_increment_events(client, create_sensor) -> None:
    sensor = create_sensor()

    client.post(f"/sensors/{sensor['uuid']}/increment-events")
    resp = client.post(f"/sensors/{sensor['uuid']}/increment-events")

    assert resp.status_code == 200
    assert resp.json()["total_events"] == 2


def test_increment_shutdowns_stamps_last_shutdown(client, create_sensor) -> None:
    sensor = create_sensor()

    resp = client.post(f"/sensors/{sensor['uuid']}/increment-shutdowns")

    assert resp.status_code == 200
    data = resp.json()
    assert data["total_shutdown"] == 1
    assert data["last_shutdown"] is not None


def test_increment_unknown_sensor_is_404(client) -> None:
    assert client.post(f"/sensors/{uuid4()}/increment-events").status_code == 404
    assert client.post(f"/sensors/{uuid4()}/increment-shutdowns").status_code == 404


def test_delete_sensor_removes_its_events(client, create_sensor, create_event) -> None:
    sensor = create_sensor()
    event = create_event(sensor["uuid"])

    assert client.delete(f"/sensors/{sensor['uuid']}").status_code == 204

    assert client.get(f"/sensors/{sensor['uuid']}").status_code == 404
    assert client.get(f"/events/{event['uuid']}").status_code == 404


def test_search_sensors(client, create_user, create_sensor) -> None:
    owner = create_user()
    farm = create_sensor(code="SOLAR-FARM-001", angle=180.0, power_generate=850.5)
    home = create_sensor(
        code="SOLAR-HOME-001", angle=45.0, power_generate=250.5, user_uuid=owner["uuid"]
    )

    by_code = client.post("/sensors/search", json={"code": "farm"}).json()
    by_angle = client.post("/sensors/search", json={"min_angle": 45, "max_angle": 90}).json()
    by_power = client.post("/sensors/search", json={"min_power_generate": 850.5}).json()
    by_owner = client.post("/sensors/search", json={"user_uuid": owner["uuid"]}).json()

    assert [s["uuid"] for s in by_code] == [farm["uuid"]]
    assert [s["uuid"] for s in by_angle] == [home["uuid"]]
    assert [s["uuid"] for s in by_power] == [farm["uuid"]]
    assert [s["uuid"] for s in by_owner] == [home["uuid"]]


def test_search_sensors_treats_wildcards_literally(client, create_sensor) -> None:
    underscored = create_sensor(code="PANEL_A1")
    create_sensor(code="PANEL-A1")
    create_sensor(code="PANEL-B2")

    by_underscore = client.post("/sensors/search", json={"code": "_"}).json()
    by_percent = client.post("/sensors/search", json={"search": "%"}).json()

    assert [s["uuid"] for s in by_underscore] == [underscored["uuid"]]
    assert by_percent == []


def test_search_sensors_rejects_angle_out_of_range(client) -> None:
    resp = client.post("/sensors/search", json={"max_angle": 400})
    assert resp.status_code == 422
