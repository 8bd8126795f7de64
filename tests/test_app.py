"""End-to-end tests through the SQL DAO, plus the service endpoints."""

from app.core.config import Settings


def test_example_scenario_against_sql(sql_client):
    response = sql_client.post("/products", json={"name": "Widget", "price": 9.99})
    assert response.status_code == 200
    created = response.json()
    assert created == {"id": 1, "name": "Widget", "price": 9.99}

    assert sql_client.get("/products/1").json() == created
    assert sql_client.get("/products").json() == [created]

    assert sql_client.delete("/products/1").status_code == 204
    assert sql_client.get("/products/1").json() is None
    assert sql_client.delete("/products/1").status_code == 204


def test_health(sql_client):
    response = sql_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "environment": "local",
        "storage_backend": "sql",
    }


def test_request_id_header(sql_client):
    response = sql_client.get("/", headers={"X-Request-ID": "abc-123"})
    assert response.status_code == 200
    assert response.headers["X-Request-ID"] == "abc-123"
    assert response.json()["message"] == "Product Service is running"


def test_cors_origins_comma_separated():
    settings = Settings(cors_origins="http://a.test, http://b.test")
    assert settings.get_cors_origins_list() == ["http://a.test", "http://b.test"]


def test_cors_origins_json_string():
    settings = Settings(cors_origins='["http://a.test"]')
    assert settings.get_cors_origins_list() == ["http://a.test"]



def test_largest_64_bit_id_reaches_sql_store(sql_client):
    response = sql_client.get(f"/products/{2**63 - 1}")
    assert response.status_code == 200
    assert response.json() is None


def test_out_of_range_input_rejected_before_sql_store(sql_client):
    assert sql_client.get("/products/99999999999999999999").status_code == 422
    assert sql_client.delete("/products/99999999999999999999").status_code == 422
    assert sql_client.get("/products", params={"skip": -1}).status_code == 422
    assert sql_client.get("/products", params={"limit": -1}).status_code == 422
