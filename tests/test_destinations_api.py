import routes.destinations as destinations_routes


def test_destination_crud(client, ana, destination):
    assert destination["lat"] == -41.13
    assert destination["tags"] == ["nieve", "montaña"]

    public = client.get(f"/destinations/{destination['id']}")
    assert public.status_code == 200

    patched = client.patch(
        f"/destinations/{destination['id']}", json={"summary": "Capital nacional del chocolate.", "lat": None}, headers=ana
    )
    assert patched.status_code == 200
    assert patched.json()["summary"] == "Capital nacional del chocolate."
    assert patched.json()["lat"] == -41.13

    assert client.delete(f"/destinations/{destination['id']}").status_code == 401
    assert client.delete(f"/destinations/{destination['id']}", headers=ana).status_code == 204
    assert client.get(f"/destinations/{destination['id']}").status_code == 404


def test_destination_filters(client, ana, destination):
    client.post(
        "/destinations/",
        json={"name": "Cusco", "country": "Perú", "summary": "Antigua capital del imperio inca.", "lat": -13.5, "lng": -71.9, "tags": ["historia"]},
        headers=ana,
    )

    assert [d["name"] for d in client.get("/destinations/?country=Argentina").json()] == ["Bariloche"]
    assert [d["name"] for d in client.get("/destinations/?tag=historia").json()] == ["Cusco"]
    assert [d["name"] for d in client.get("/destinations/").json()] == ["Cusco", "Bariloche"]
    assert [d["name"] for d in client.get("/destinations/?limit=1").json()] == ["Cusco"]


def test_destination_without_coords_is_geocoded(client, ana, monkeypatch):
    queries = []

    async def fake_geocode(query, timeout=10.0):
        queries.append(query)
        return (-34.6, -58.38, "Buenos Aires, Argentina")

    monkeypatch.setattr(destinations_routes, "geocode_place_to_coords", fake_geocode)

    resp = client.post(
        "/destinations/",
        json={"name": "Buenos Aires", "country": "Argentina", "summary": "Tango, parrillas y librerías."},
        headers=ana,
    )
    assert resp.status_code == 201, resp.text
    assert (resp.json()["lat"], resp.json()["lng"]) == (-34.6, -58.38)
    assert queries == ["Buenos Aires, Argentina"]


def test_destination_geocoding_failure(client, ana, monkeypatch):
    async def no_result(query, timeout=10.0):
        return None

    monkeypatch.setattr(destinations_routes, "geocode_place_to_coords", no_result)

    resp = client.post(
        "/destinations/",
        json={"name": "Atlántida", "country": "Nadie", "summary": "Una ciudad que nadie encontró."},
        headers=ana,
    )
    assert resp.status_code == 400


def test_activity_crud_and_filters(client, ana, destination):
    payload = {"destination_id": destination["id"], "name": "Cerro Catedral", "category": "aventura", "price_range": "high"}
    created = client.post("/activities/", json=payload, headers=ana)
    assert created.status_code == 201, created.text
    activity = created.json()
    assert activity["reviews_count"] == 0
    assert activity["images"] == []

    client.post(
        "/activities/",
        json={"destination_id": destination["id"], "name": "Chocolatería", "category": "gastronomía", "price_range": "low"},
        headers=ana,
    )

    by_category = client.get("/activities/?category=aventura").json()
    assert [a["name"] for a in by_category] == ["Cerro Catedral"]
    assert len(client.get(f"/activities/?destination_id={destination['id']}").json()) == 2

    patched = client.patch(f"/activities/{activity['id']}", json={"rating": 4.5, "name": None}, headers=ana)
    assert patched.status_code == 200
    assert patched.json()["rating"] == 4.5
    assert patched.json()["name"] == "Cerro Catedral"

    assert client.delete(f"/activities/{activity['id']}", headers=ana).status_code == 204
    assert client.get(f"/activities/{activity['id']}").status_code == 404


def test_activity_validation(client, ana, destination):
    bad_price = {"destination_id": destination["id"], "name": "Kayak", "category": "agua", "price_range": "cheap"}
    assert client.post("/activities/", json=bad_price, headers=ana).status_code == 422

    missing_destination = {"destination_id": 999, "name": "Kayak", "category": "agua", "price_range": "low"}
    assert client.post("/activities/", json=missing_destination, headers=ana).status_code == 404

    assert client.post("/activities/", json=dict(bad_price, price_range="low")).status_code == 401
