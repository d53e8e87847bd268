"""API tests for the dashboard, reports and billing."""

import pytest


@pytest.fixture
def globex(client):
    """A second client with its own 200/h service."""
    other = client.post("/api/clients", json={
        "code": "C002", "name": "Globex", "cnpj": "22", "email": "globex@example.com",
    }).json()
    service = client.post("/api/services", json={
        "code": "S002", "clientId": other["id"], "description": "Consultoria", "hourlyRate": "200.00",
    }).json()
    return {"client": other, "service": service}


class TestDashboardApi:
    """Tests for /api/dashboard/stats."""

    def test_stats_for_month(self, client, time_entry_payload):
        client.post("/api/time-entries", json=time_entry_payload(date="2024-03-05"))
        client.post("/api/time-entries", json=time_entry_payload(date="2024-03-06"))
        client.post("/api/time-entries", json=time_entry_payload(date="2024-04-01"))

        response = client.get("/api/dashboard/stats", params={"month": 3, "year": 2024})

        assert response.status_code == 200
        assert response.json() == {
            "totalClients": 1,
            "monthlyHours": 14.0,
            "monthlyRevenue": 1400.0,
            "activeConsultants": 1,
        }

    def test_empty_month(self, client, api_catalog):
        response = client.get("/api/dashboard/stats", params={"month": 1, "year": 1999})

        assert response.json() == {
            "totalClients": 1,
            "monthlyHours": 0.0,
            "monthlyRevenue": 0.0,
            "activeConsultants": 0,
        }

    def test_defaults_to_current_month(self, client):
        response = client.get("/api/dashboard/stats")

        assert response.status_code == 200
        assert response.json()["totalClients"] == 0


class TestReportsApi:
    """Tests for /api/reports."""

    def test_breakdown_by_client(self, client, time_entry_payload, globex):
        client.post("/api/time-entries", json=time_entry_payload(date="2024-03-05"))
        client.post("/api/time-entries", json=time_entry_payload(
            date="2024-03-06", clientId=globex["client"]["id"], serviceId=globex["service"]["id"],
        ))

        report = client.get("/api/reports", params={"startDate": "2024-03-01", "endDate": "2024-03-31"}).json()

        assert report["totalEntries"] == 2
        assert report["totalClients"] == 2
        assert report["totalHours"] == 14.0
        assert report["totalValue"] == 2100.0
        assert [b["clientName"] for b in report["clientBreakdown"]] == ["Globex", "Acme"]
        assert report["clientBreakdown"][0] == {
            "clientId": globex["client"]["id"],
            "clientName": "Globex",
            "hours": 7.0,
            "value": 1400.0,
            "entries": 1,
        }

    def test_filter_by_client(self, client, time_entry_payload, globex, api_catalog):
        client.post("/api/time-entries", json=time_entry_payload())
        client.post("/api/time-entries", json=time_entry_payload(
            clientId=globex["client"]["id"], serviceId=globex["service"]["id"],
        ))

        report = client.get("/api/reports", params={"clientId": api_catalog["client"]["id"]}).json()

        assert report["totalEntries"] == 1
        assert report["totalValue"] == 700.0

    def test_empty_report(self, client):
        report = client.get("/api/reports").json()

        assert report == {
            "totalHours": 0.0,
            "totalValue": 0.0,
            "totalEntries": 0,
            "totalClients": 0,
            "clientBreakdown": [],
        }


class TestBillingApi:
    """Tests for /api/billing."""

    def test_summary_groups_with_labels(self, client, time_entry_payload, api_catalog):
        first = client.post("/api/time-entries", json=time_entry_payload(date="2024-03-05")).json()
        client.post("/api/time-entries", json=time_entry_payload(date="2024-03-06"))

        response = client.post("/api/billing/summary", json={
            "clientId": api_catalog["client"]["id"],
            "startDate": "2024-03-01",
            "endDate": "2024-03-31",
        })

        assert response.status_code == 200
        summary = response.json()
        assert summary["totalEntries"] == 2
        assert summary["totalValue"] == 1400.0
        assert summary["groups"] == [{
            "project": "Projeto Portal",
            "sector": "Sem Setor",
            "serviceType": "Sem Tipo",
            "hours": 14.0,
            "value": 1400.0,
            "entries": 2,
        }]

        selected = client.post("/api/billing/summary", json={
            "clientId": api_catalog["client"]["id"],
            "startDate": "2024-03-01",
            "endDate": "2024-03-31",
            "entryIds": [first["id"]],
        }).json()
        assert selected["totalEntries"] == 1

    def test_summary_uses_sector_and_service_type(self, client, time_entry_payload, api_catalog):
        client_id = api_catalog["client"]["id"]
        service_type = client.post("/api/service-types", json={"code": "DEV", "description": "Desenvolvimento"}).json()
        client.put(f"/api/services/{api_catalog['service']['id']}", json={"serviceTypeId": service_type["id"]})
        sector = client.post("/api/sectors", json={"code": "TI", "description": "Tecnologia", "clientId": client_id}).json()
        client.post("/api/time-entries", json=time_entry_payload(sectorId=sector["id"]))

        summary = client.post("/api/billing/summary", json={
            "clientId": client_id, "startDate": "2024-03-01", "endDate": "2024-03-31",
        }).json()

        assert summary["groups"][0]["sector"] == "Tecnologia"
        assert summary["groups"][0]["serviceType"] == "Desenvolvimento"

    def test_summary_requires_period(self, client):
        response = client.post("/api/billing/summary", json={"clientId": 1})

        assert response.status_code == 400
        fields = {e["field"] for e in response.json()["errors"]}
        assert fields == {"startDate", "endDate"}

    def test_generate_pdf_is_not_available(self, client):
        response = client.post("/api/billing/generate-pdf", json={
            "clientId": 1, "startDate": "2024-03-01", "endDate": "2024-03-31",
        })

        assert response.status_code == 501
        assert response.json()["code"] == "NOT_IMPLEMENTED"
