"""API tests for clients, consultants, services, service types and sectors."""

ACME = {"code": "C001", "name": "Acme", "cnpj": "11.111.111/0001-11", "email": "acme@example.com"}


class TestClientsApi:
    """Tests for /api/clients."""

    def test_create_and_get(self, client):
        response = client.post("/api/clients", json=ACME)

        assert response.status_code == 201
        created = response.json()
        assert created["id"] > 0
        assert created["code"] == "C001"

        fetched = client.get(f"/api/clients/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == created

    def test_duplicate_code_is_rejected(self, client):
        client.post("/api/clients", json=ACME)

        response = client.post("/api/clients", json={**ACME, "cnpj": "22.222.222/0001-22"})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "RESOURCE_ALREADY_EXISTS"
        assert body["errors"][0]["field"] == "code"
        assert len(client.get("/api/clients").json()) == 1

    def test_duplicate_cnpj_is_rejected(self, client):
        client.post("/api/clients", json=ACME)

        response = client.post("/api/clients", json={**ACME, "code": "C002"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "cnpj"

    def test_invalid_email_is_a_validation_error(self, client):
        response = client.post("/api/clients", json={**ACME, "email": "not-an-email"})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert [e["field"] for e in body["errors"]] == ["email"]

    def test_missing_fields_are_reported(self, client):
        response = client.post("/api/clients", json={"code": "C001"})

        assert response.status_code == 400
        fields = {e["field"] for e in response.json()["errors"]}
        assert fields == {"name", "cnpj", "email"}

    def test_partial_update(self, client):
        created = client.post("/api/clients", json=ACME).json()

        response = client.put(f"/api/clients/{created['id']}", json={"name": "Acme Ltda"})

        assert response.status_code == 200
        assert response.json() == {**created, "name": "Acme Ltda"}

    def test_unknown_client(self, client):
        assert client.get("/api/clients/99").status_code == 404
        assert client.put("/api/clients/99", json={"name": "x"}).status_code == 404

        response = client.delete("/api/clients/99")
        assert response.status_code == 404
        assert response.json()["code"] == "RESOURCE_NOT_FOUND"

    def test_delete(self, client):
        created = client.post("/api/clients", json=ACME).json()

        response = client.delete(f"/api/clients/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/api/clients/{created['id']}").status_code == 404

    def test_delete_referenced_client_on_memory_backend(self, client, api_catalog):
        acme = api_catalog["client"]

        response = client.delete(f"/api/clients/{acme['id']}")

        # No foreign keys in memory: the service keeps pointing at the removed client
        assert response.status_code == 204
        assert client.get(f"/api/services/{api_catalog['service']['id']}").status_code == 200


class TestConsultantsApi:
    """Tests for /api/consultants."""

    def test_password_is_never_returned(self, client):
        created = client.post("/api/consultants", json={"code": "ANA", "name": "Ana", "password": "segredo"})

        assert created.status_code == 201
        assert "password" not in created.json()
        assert all("password" not in c for c in client.get("/api/consultants").json())

    def test_password_is_stored_hashed(self, client, memory_provider):
        created = client.post("/api/consultants", json={"code": "ANA", "name": "Ana", "password": "segredo"}).json()

        stored = memory_provider.storage.consultants.rows()[created["id"]]
        assert stored.password != "segredo"

    def test_duplicate_code(self, client):
        client.post("/api/consultants", json={"code": "ANA", "name": "Ana", "password": "a"})

        response = client.post("/api/consultants", json={"code": "ANA", "name": "Outra", "password": "b"})

        assert response.status_code == 400


class TestServicesApi:
    """Tests for /api/services and /api/service-types."""

    def test_create_service_keeps_rate_precision(self, client, api_catalog):
        service = api_catalog["service"]

        assert service["hourlyRate"] == "100.00"
        assert service["clientId"] == api_catalog["client"]["id"]
        assert service["serviceTypeId"] is None

    def test_list_includes_client(self, client, api_catalog):
        services = client.get("/api/services").json()

        assert len(services) == 1
        assert services[0]["client"]["name"] == "Acme"

    def test_by_client(self, client, api_catalog):
        client_id = api_catalog["client"]["id"]

        assert len(client.get(f"/api/services/by-client/{client_id}").json()) == 1
        assert client.get("/api/services/by-client/999").json() == []

    def test_service_for_unknown_client(self, client):
        response = client.post("/api/services", json={
            "code": "S001", "clientId": 42, "description": "Portal", "hourlyRate": 10,
        })

        assert response.status_code == 404

    def test_negative_rate_is_rejected(self, client, api_catalog):
        response = client.post("/api/services", json={
            "code": "S002", "clientId": api_catalog["client"]["id"], "description": "x", "hourlyRate": -1,
        })

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "hourlyRate"

    def test_service_type_can_be_attached_and_cleared(self, client, api_catalog):
        service_type = client.post("/api/service-types", json={"code": "DEV", "description": "Desenvolvimento"})
        assert service_type.status_code == 201
        service_id = api_catalog["service"]["id"]

        attached = client.put(f"/api/services/{service_id}", json={"serviceTypeId": service_type.json()["id"]})
        cleared = client.put(f"/api/services/{service_id}", json={"serviceTypeId": None})

        assert attached.json()["serviceTypeId"] == service_type.json()["id"]
        assert cleared.json()["serviceTypeId"] is None


class TestSectorsApi:
    """Tests for /api/sectors."""

    def test_sector_without_client(self, client):
        response = client.post("/api/sectors", json={"code": "TI", "description": "Tecnologia"})

        assert response.status_code == 201
        assert response.json()["clientId"] is None

    def test_by_client(self, client, api_catalog):
        client_id = api_catalog["client"]["id"]
        client.post("/api/sectors", json={"code": "TI", "description": "Tecnologia", "clientId": client_id})
        client.post("/api/sectors", json={"code": "RH", "description": "Pessoas"})

        sectors = client.get(f"/api/sectors/by-client/{client_id}").json()

        assert [s["code"] for s in sectors] == ["TI"]
        assert len(client.get("/api/sectors").json()) == 2


class TestFrameworkErrors:
    """Tests for errors raised outside the endpoints."""

    def test_unknown_route(self, client):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json()["code"] == "HTTP_404"

    def test_non_integer_id(self, client):
        response = client.get("/api/clients/abc")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "client_id"
