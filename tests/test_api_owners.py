"""
Tests for the /api/owners endpoints.
"""
import base64

from sqlalchemy.exc import OperationalError

OWNER_FORM = {"name": "Grace Hopper", "address": "9 Navy Rd", "birthday": "1906-12-09"}


class TestOwnerEndpoints:

     def test_list_seeded_owners(self, seeded_client):
          response = seeded_client.get("/api/owners")

          assert response.status_code == 200
          assert [o["name"] for o in response.json()] == ["John Doe", "Jane Smith"]

     def test_create_with_photo(self, client):
          photo = b"\x89PNG\r\n\x1a\nfake"

          response = client.post(
               "/api/owners",
               data=OWNER_FORM,
               files={"photo": ("grace.png", photo, "image/png")},
          )

          assert response.status_code == 201
          body = response.json()
          assert body["name"] == "Grace Hopper"
          assert body["birthday"] == "1906-12-09"
          assert base64.b64decode(body["photo"]) == photo

          fetched = client.get(f"/api/owners/{body['id']}")
          assert fetched.status_code == 200
          assert fetched.json() == body

     def test_create_without_photo(self, client):
          response = client.post("/api/owners", data=OWNER_FORM)

          assert response.status_code == 201
          assert response.json()["photo"] is None

     def test_create_requires_fields(self, client):
          response = client.post("/api/owners", data={"name": "No Address"})

          assert response.status_code == 422

     def test_photo_over_limit_is_rejected(self, client, monkeypatch):
          monkeypatch.setattr("config.MAX_UPLOAD_BYTES", 4)

          response = client.post(
               "/api/owners",
               data=OWNER_FORM,
               files={"photo": ("big.png", b"12345", "image/png")},
          )

          assert response.status_code == 400
          assert client.get("/api/owners").json() == []

     def test_get_missing_owner(self, client):
          assert client.get("/api/owners/999").status_code == 404

     def test_update_replaces_fields(self, seeded_client):
          response = seeded_client.put(
               "/api/owners/1",
               data={"name": "John Q. Doe", "address": "1 New St", "birthday": "1976-01-01"},
          )

          assert response.status_code == 204
          body = seeded_client.get("/api/owners/1").json()
          assert (body["name"], body["address"], body["birthday"]) == ("John Q. Doe", "1 New St", "1976-01-01")

     def test_update_missing_owner(self, client):
          assert client.put("/api/owners/999", data=OWNER_FORM).status_code == 404

     def test_list_owner_properties(self, seeded_client):
          response = seeded_client.get("/api/owners/2/properties")

          assert response.status_code == 200
          assert [p["name"] for p in response.json()] == ["Beachfront Condo"]
          assert seeded_client.get("/api/owners/999/properties").status_code == 404

     def test_delete_cascades_through_catalog(self, seeded_client):
          response = seeded_client.delete("/api/owners/1")

          assert response.status_code == 204
          assert seeded_client.get("/api/owners/1").status_code == 404
          assert [p["id"] for p in seeded_client.get("/api/properties").json()] == [2]
          assert [i["property_id"] for i in seeded_client.get("/api/property-images").json()] == [2]
          assert [t["property_id"] for t in seeded_client.get("/api/property-traces").json()] == [2]

     def test_delete_missing_owner(self, client):
          assert client.delete("/api/owners/999").status_code == 404

     def test_storage_failure_maps_to_500(self, client, db_session, monkeypatch):
          def _broken_commit():
               raise OperationalError("COMMIT", {}, Exception("database is locked"))

          monkeypatch.setattr(db_session, "commit", _broken_commit)

          response = client.post("/api/owners", data=OWNER_FORM)

          assert response.status_code == 500
          assert response.json() == {"error": "Internal server error"}
