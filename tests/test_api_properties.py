"""
Tests for the /api/properties endpoints, including the search.
"""
import pytest

PROPERTY_BODY = {
     "name": "Lake House",
     "address": "5 Shore Ln",
     "price": 750000,
     "code_internal": "LKH789",
     "year": 2001,
     "owner_id": 1,
}


class TestPropertyCrud:

     def test_list_seeded(self, seeded_client):
          response = seeded_client.get("/api/properties")

          assert response.status_code == 200
          assert [p["code_internal"] for p in response.json()] == ["MODV123", "BFCD456"]

     def test_create(self, seeded_client):
          response = seeded_client.post("/api/properties", json=PROPERTY_BODY)

          assert response.status_code == 201
          body = response.json()
          assert body["id"] == 3
          assert {k: body[k] for k in PROPERTY_BODY} == PROPERTY_BODY

     def test_create_with_missing_owner(self, seeded_client):
          response = seeded_client.post("/api/properties", json={**PROPERTY_BODY, "owner_id": 99})

          assert response.status_code == 400
          assert len(seeded_client.get("/api/properties").json()) == 2

     @pytest.mark.parametrize(
          "override",
          [{"price": 0}, {"year": 1799}, {"year": 2025}, {"name": ""}, {"owner_id": 0}],
     )
     def test_create_rejects_invalid_fields(self, seeded_client, override):
          response = seeded_client.post("/api/properties", json={**PROPERTY_BODY, **override})

          assert response.status_code == 422

     def test_get_missing(self, client):
          assert client.get("/api/properties/5").status_code == 404

     def test_update(self, seeded_client):
          body = {**PROPERTY_BODY, "owner_id": 2}

          response = seeded_client.put("/api/properties/1", json=body)

          assert response.status_code == 204
          stored = seeded_client.get("/api/properties/1").json()
          assert stored == {"id": 1, **body}

     def test_update_missing_property(self, seeded_client):
          assert seeded_client.put("/api/properties/42", json=PROPERTY_BODY).status_code == 404

     def test_update_to_missing_owner(self, seeded_client):
          response = seeded_client.put("/api/properties/1", json={**PROPERTY_BODY, "owner_id": 99})

          assert response.status_code == 400
          assert seeded_client.get("/api/properties/1").json()["owner_id"] == 1

     def test_delete(self, seeded_client):
          assert seeded_client.delete("/api/properties/2").status_code == 204
          assert seeded_client.get("/api/properties/2").status_code == 404
          assert seeded_client.get("/api/property-images/2").status_code == 404
          assert seeded_client.get("/api/property-traces/2").status_code == 404
          assert seeded_client.delete("/api/properties/2").status_code == 404

     def test_children(self, seeded_client):
          images = seeded_client.get("/api/properties/1/images")
          traces = seeded_client.get("/api/properties/1/traces")

          assert images.status_code == 200
          assert images.json() == [{"id": 1, "property_id": 1, "enabled": True, "file": None}]
          assert traces.json()[0]["name"] == "Initial Sale"
          assert seeded_client.get("/api/properties/9/images").status_code == 404
          assert seeded_client.get("/api/properties/9/traces").status_code == 404


class TestPropertySearch:

     @pytest.fixture
     def search_client(self, client):
          owner_id = client.post(
               "/api/owners", data={"name": "Seller", "address": "1 Road", "birthday": "1980-01-01"}
          ).json()["id"]
          for name, price, year in [("Cabin", 500, 2015), ("Villa", 1500, 2020), ("Tower", 2000, 2020)]:
               client.post("/api/properties", json={
                    "name": name, "address": "x", "price": price,
                    "code_internal": name.upper(), "year": year, "owner_id": owner_id,
               })
          return client

     def test_min_price_and_year(self, search_client):
          response = search_client.get("/api/properties/filter", params={"min_price": 1000, "year": 2020})

          assert response.status_code == 200
          assert [p["name"] for p in response.json()] == ["Villa", "Tower"]

     def test_no_filters_matches_list(self, search_client):
          filtered = search_client.get("/api/properties/filter").json()

          assert filtered == search_client.get("/api/properties").json()

     def test_name_and_max_price(self, search_client):
          response = search_client.get("/api/properties/filter", params={"name": "ill", "max_price": 1500})

          assert [p["name"] for p in response.json()] == ["Villa"]

     def test_rejects_non_numeric_price(self, search_client):
          assert search_client.get("/api/properties/filter", params={"min_price": "cheap"}).status_code == 422

     def test_negative_min_price_is_accepted(self, search_client):
          response = search_client.get("/api/properties/filter", params={"min_price": -1})

          assert response.status_code == 200
          assert response.json() == search_client.get("/api/properties").json()
