# tests/http_api/test_system.py

from typing import Any, Dict

from solar_winds_api.main import app

RESOURCES = ("users", "addresses", "sensors", "events")
HTTP_METHODS = {"get", "post", "put", "patch", "delete"}


def _get_api_operations() -> Dict[str, Dict[str, Any]]:
    """Return ``{"METHOD /path": operation}`` for every documented endpoint."""
    operations: Dict[str, Dict[str, Any]] = {}
    for path, item in app.openapi()["paths"].items():
        for method, operation in item.items():
            if method in HTTP_METHODS:
                operations[f"{method.upper()} {path}"] = operation
    return operations


def test_root_banner(client) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == "Solar Winds API is running!"


def test_health(client) -> None:
    resp = client.get("/health")

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["service"] == "solar-winds-api"
    assert data["version"]
    assert data["timestamp"]


def test_resource_routes_registered_and_tagged() -> None:
    """
    Every resource router is mounted and its routes carry the resource tag,
    so they are grouped in the OpenAPI docs.
    """
    operations = _get_api_operations()

    for resource in RESOURCES:
        resource_ops = {
            key: op for key, op in operations.items() if key.split(" ", 1)[1].startswith(f"/{resource}")
        }
        assert resource_ops, f"No /{resource} routes registered."
        assert f"POST /{resource}/search" in resource_ops
        for key, op in resource_ops.items():
            assert resource in op.get("tags", []), f"Route {key} is missing the '{resource}' tag."


def test_sensor_and_event_specific_routes_documented() -> None:
    operations = _get_api_operations()

    for key in (
        "GET /sensors/code/{code}",
        "POST /sensors/{sensor_uuid}/increment-events",
        "POST /sensors/{sensor_uuid}/increment-shutdowns",
        "GET /events/sensor/{sensor_uuid}",
        "GET /events/sensor/{sensor_uuid}/stats",
    ):
        assert key in operations, f"{key} is not documented."


def test_cors_allows_frontend_origin(client) -> None:
    resp = client.options(
        "/users",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert resp.headers.get("access-control-allow-origin") == "http://localhost:5173"
