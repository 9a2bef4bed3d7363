from fastapi.testclient import TestClient

from cldr_territory.main import app

client = TestClient(app)


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_styles_and_country_codes():
    assert client.get("/territories/styles").json() == ["short", "standard", "variant"]
    assert "US" in client.get("/territories/country-codes").json()


def test_name():
    resp = client.get("/territories/gb/name", params={"locale": "pt"})
    assert resp.status_code == 200
    assert resp.json() == {"code": "GB", "locale": "pt", "style": "standard", "name": "Reino Unido"}
    assert client.get("/territories/US/name", params={"style": "short"}).json()["name"] == "US"


def test_name_errors():
    resp = client.get("/territories/ZZ/name")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "The territory 'ZZ' is unknown"
    assert client.get("/territories/US/name", params={"locale": "zzz"}).status_code == 404
    assert client.get("/territories/US/name", params={"style": "zzz"}).status_code == 422


def test_hierarchy_routes():
    assert client.get("/territories/FR/parents").json()["codes"] == ["155", "EU", "EZ", "UN"]
    assert client.get("/territories/001/parents").status_code == 422
    assert "DK" in client.get("/territories/EU/children").json()["codes"]
    assert client.get("/territories/EU/contains/dk").json()["contains"] is True
    assert client.get("/territories/EU/contains/GB").json()["contains"] is False


def test_flag_route():
    assert client.get("/territories/US/flag").json()["flag"] == "\U0001F1FA\U0001F1F8"
    assert client.get("/territories/EZ/flag").status_code == 422


def test_translate_route():
    resp = client.get("/territories/translate", params={"name": "SAD", "from_locale": "bs", "to_locale": "en"})
    assert resp.json()["translation"] == "US"
    assert client.get("/territories/translate", params={"name": "Atlantis", "from_locale": "en"}).status_code == 404


def test_currencies_and_info():
    assert client.get("/territories/PS/currencies").json() == {
        "code": "PS", "primary": "ILS", "currencies": ["ILS", "JOD"],
    }
    assert client.get("/territories/150/currencies").status_code == 422
    assert client.get("/territories/US/info").json()["population"] == 329256000


def test_locale_territories():
    codes = client.get("/territories/locales/bs").json()
    assert "BA" in codes
    assert client.get("/territories/locales/zzz").status_code == 404
