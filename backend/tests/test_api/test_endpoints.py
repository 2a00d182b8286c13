"""HTTP-level tests for the v1 API."""

import pytest


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["regions"] == 5
        assert body["loans"] == 8
        assert body["weather_regions"] == ["Houston", "Miami", "NewOrleans", "NewYork", "SanFrancisco"]
        assert body["seeded_scenarios"] is False


class TestHazardEndpoints:
    def test_types(self, client):
        resp = client.get("/api/v1/hazard/types")
        assert resp.status_code == 200
        assert [h["id"] for h in resp.json()] == ["flood", "fire", "wind", "heat"]

    def test_regions(self, client):
        regions = client.get("/api/v1/hazard/regions").json()
        assert {"id": "Miami", "name": "Miami", "lat": 25.7617, "lng": -80.1918} in regions

    def test_historical(self, client):
        body = client.get("/api/v1/hazard/historical/flood").json()
        assert body["hazard_type"] == "flood"
        assert len(body["events"]) == 5

    def test_region_hazard_projection(self, client):
        resp = client.get("/api/v1/hazard/flood/Miami", params={"timeframe": "2050"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["timeframe"] == 2050
        assert body["zone_count"] == 2
        # zone 1: round(12 * 1.35) = 16, zone 2: round(8 * 1.35) = 11
        assert body["affected_properties"] == 27
        assert body["expected_loss"] == pytest.approx(2_500_000 * 1.8 + 1_200_000 * 1.8)
        assert body["zones"][0]["radius"] == pytest.approx(750)

    def test_default_timeframe_is_present(self, client):
        body = client.get("/api/v1/hazard/wind/Houston").json()
        assert body["timeframe"] == 2023
        assert body["zones"][0]["radius"] == body["zones"][0]["base_radius"]

    def test_unknown_region(self, client):
        resp = client.get("/api/v1/hazard/flood/Atlantis")
        assert resp.status_code == 404
        assert "Atlantis" in resp.json()["detail"]

    def test_unknown_hazard(self, client):
        assert client.get("/api/v1/hazard/earthquake/Miami").status_code == 422

    def test_unknown_timeframe(self, client):
        resp = client.get("/api/v1/hazard/flood/Miami", params={"timeframe": "2075"})
        assert resp.status_code == 422


class TestPortfolioEndpoints:
    def test_book(self, client):
        body = client.get("/api/v1/portfolio").json()
        assert body["total_loans"] == 1250
        assert body["average_ltv"] == 0.72

    def test_summary(self, client):
        body = client.get("/api/v1/portfolio/summary").json()
        assert body["total_loans"] == 8
        assert body["total_value"] == 3_795_000

    def test_region(self, client):
        body = client.get("/api/v1/portfolio/region/Miami").json()
        assert [loan["id"] for loan in body["loans"]] == ["L001", "L002", "L003"]
        assert body["summary"]["total_value"] == 1_045_000

    def test_loan(self, client):
        body = client.get("/api/v1/portfolio/loan/L001").json()
        assert body["value"] == 450_000
        assert body["risk"] == "high"

    def test_unknown_loan(self, client):
        assert client.get("/api/v1/portfolio/loan/L999").status_code == 404


class TestWeatherEndpoints:
    def test_observation(self, client):
        body = client.get("/api/v1/weather/Miami").json()
        assert body["condition"] == "Rain"
        assert body["precipitation_mm_per_hour"] == 25
        assert body["alerts"][0]["categories"] == ["flood"]

    def test_assessment(self, client):
        body = client.get("/api/v1/weather/Miami/assessment").json()
        assert body["has_data"] is True
        assert body["percentage_at_risk"] == pytest.approx(45.0)
        assert body["high_risk_loans"] == 3
        first = body["loans"][0]
        assert first["id"] == "L001"
        assert first["weather_risk"]["expected_loss"] == pytest.approx(202_500)
        assert first["weather_risk"]["risk_level"] == "high"

    def test_houston_thunderstorm(self, client):
        body = client.get("/api/v1/weather/Houston/assessment").json()
        # 0.12 thunderstorm + 0.10 wind over 18 m/s
        assert body["loans"][0]["weather_risk"]["risk_factor"] == pytest.approx(0.22)

    def test_unknown_region(self, client):
        assert client.get("/api/v1/weather/Atlantis").status_code == 404
        assert client.get("/api/v1/weather/Atlantis/assessment").status_code == 404


class TestAnalysisEndpoints:
    def test_run_and_fetch(self, client):
        resp = client.post(
            "/api/v1/analysis/run",
            json={"hazard_type": "flood", "return_period": 100, "intensity": 0, "timeframe": "present"},
        )
        assert resp.status_code == 200
        run = resp.json()
        assert run["parameters"]["portfolio_id"] == "portfolio-main"
        assert run["parameters"]["intensity_label"] == "Minor"
        assert run["results"]["total_expected_loss"] == pytest.approx(16_600_000)
        assert run["results"]["risk_hotspots"][0]["region"] == "NewYork"

        fetched = client.get(f"/api/v1/analysis/{run['id']}").json()
        assert fetched["id"] == run["id"]

        history = client.get("/api/v1/analysis/history").json()
        assert history[0]["id"] == run["id"]

    def test_run_with_year_timeframe(self, client):
        resp = client.post("/api/v1/analysis/run", json={"hazard_type": "wind", "timeframe": 2100})
        assert resp.status_code == 200
        assert resp.json()["parameters"]["timeframe"] == 2100

    def test_run_rejects_bad_return_period(self, client):
        resp = client.post("/api/v1/analysis/run", json={"hazard_type": "flood", "return_period": 25})
        assert resp.status_code == 422

    def test_run_rejects_unknown_region(self, client):
        resp = client.post("/api/v1/analysis/run", json={"hazard_type": "flood", "region": "Atlantis"})
        assert resp.status_code == 404

    def test_run_rejects_unknown_portfolio(self, client):
        resp = client.post("/api/v1/analysis/run", json={"hazard_type": "flood", "portfolio_id": "other-book"})
        assert resp.status_code == 404
        assert "other-book" in resp.json()["detail"]

    def test_run_requires_hazard(self, client):
        assert client.post("/api/v1/analysis/run", json={}).status_code == 422

    def test_unknown_analysis(self, client):
        assert client.get("/api/v1/analysis/analysis-000000000000").status_code == 404

    def test_stress(self, client):
        resp = client.post(
            "/api/v1/analysis/stress",
            json={"hazard_type": "flood", "intensity": 5, "property_value": 400_000, "lat": 25.7, "lon": -80.2},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["expected_loss_value"] == pytest.approx(200_000)
        assert body["confidence_interval"] == pytest.approx([120_000, 280_000])
        assert body["lat"] == 25.7

    def test_stress_rejects_intensity(self, client):
        resp = client.post(
            "/api/v1/analysis/stress",
            json={"hazard_type": "flood", "intensity": 9, "property_value": 400_000},
        )
        assert resp.status_code == 422
