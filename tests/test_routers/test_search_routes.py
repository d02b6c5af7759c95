import respx
from httpx import Response

PROXY_URL = "http://api.scraperapi.com"

HOTELS_HTML = (
    '<div class="yrHgLb"><h2 class="BgYkof">Taj Mahal Palace</h2>'
    '<span class="prxS3d">₹21,000</span><span class="KFi5wf">9.3</span></div>'
)
FLIGHTS_HTML = (
    '<li class="pIav2d"><div class="sSHqwe">Vistara</div><div class="YMlIz">₹7,250</div>'
    '<div class="Ak5kof">2 hr</div><div class="BbR8Ec">Nonstop</div></li>'
)
BUSES_HTML = '<div class="bus-item"><div class="travels">Purple Travels</div><div class="fare">₹900</div></div>'
TRAINS_HTML = '<div class="train-list-item"><p class="train-name">Shatabdi</p><p class="price">₹1,200</p></div>'


def _mock_proxy(html, status=200):
    return respx.get(PROXY_URL).mock(return_value=Response(status, text=html))


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@respx.mock
async def test_hotels_from_scraper(client):
    route = _mock_proxy(HOTELS_HTML)

    resp = await client.get(
        "/search/hotels", params={"city": "Mumbai", "checkIn": "2025-01-15", "checkOut": "2025-01-20"}
    )

    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["count"] == 1
    assert data["source"] == "scraper"
    hotel = data["hotels"][0]
    assert hotel["name"] == "Taj Mahal Palace"
    assert hotel["price_per_night"] == 21000
    assert hotel["rating"] == 5
    assert hotel["coordinates"] == {"lat": 0.0, "lng": 0.0}
    assert route.calls.last.request.url.params["api_key"] == "test-scraper-key"
    assert "adults=2" in route.calls.last.request.url.params["url"]


@respx.mock
async def test_hotels_proxy_down_falls_back_to_mock(client):
    _mock_proxy("", status=503)

    resp = await client.get("/search/hotels", params={"city": "Goa"})

    data = resp.json()
    assert resp.status_code == 200
    assert data["source"] == "mock"
    assert data["count"] == 10
    assert all(h["location"] == "Goa" for h in data["hotels"])


async def test_hotels_requires_city(client):
    resp = await client.get("/search/hotels")

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "City parameter is required"}


@respx.mock
async def test_flights_one_way(client):
    _mock_proxy(FLIGHTS_HTML)

    resp = await client.get(
        "/search/flights", params={"from": "Delhi", "to": "Mumbai", "departDate": "2025-01-15"}
    )

    data = resp.json()
    assert data["count"] == 1
    flight = data["flights"][0]
    assert flight["from"] == "Delhi"
    assert flight["to"] == "Mumbai"
    assert flight["type"] == "one-way"
    assert flight["stops"] == 0


@respx.mock
async def test_flights_round_trip(client):
    route = _mock_proxy(FLIGHTS_HTML)

    resp = await client.get(
        "/search/flights",
        params={"from": "Delhi", "to": "Mumbai", "departDate": "2025-01-15", "returnDate": "2025-01-20"},
    )

    assert resp.json()["flights"][0]["type"] == "round-trip"
    assert "returning%202025-01-20" in route.calls.last.request.url.params["url"]


async def test_flights_missing_params(client):
    resp = await client.get("/search/flights", params={"from": "Delhi"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "from, to, and departDate parameters are required"


@respx.mock
async def test_flights_proxy_down_without_llm_is_empty(client):
    _mock_proxy("", status=500)

    resp = await client.get(
        "/search/flights", params={"from": "Delhi", "to": "Mumbai", "departDate": "2025-01-15"}
    )

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "count": 0, "source": "none", "flights": []}


@respx.mock
async def test_buses(client):
    _mock_proxy(BUSES_HTML)

    resp = await client.get("/search/buses", params={"from": "Bangalore", "to": "Chennai", "date": "2025-01-15"})

    bus = resp.json()["buses"][0]
    assert bus["operator"] == "Purple Travels"
    assert bus["price"] == 900
    assert bus["seats_available"] == 20
    assert bus["from"] == "Bangalore"


async def test_buses_missing_date(client):
    resp = await client.get("/search/buses", params={"from": "Bangalore", "to": "Chennai"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "from, to, and date parameters are required"


@respx.mock
async def test_trains(client):
    _mock_proxy(TRAINS_HTML)

    resp = await client.get("/search/trains", params={"from": "Delhi", "to": "Agra", "date": "2025-01-15"})

    train = resp.json()["trains"][0]
    assert train["train_name"] == "Shatabdi"
    assert train["class"] == "3AC"
    assert train["to"] == "Agra"


async def test_trains_missing_params(client):
    resp = await client.get("/search/trains")

    assert resp.status_code == 400
    assert resp.json()["success"] is False


async def test_hotels_rejects_non_numeric_adults(client):
    resp = await client.get("/search/hotels", params={"city": "Goa", "adults": "two"})

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "adults must be a positive integer"}


async def test_hotels_rejects_zero_adults(client):
    resp = await client.get("/search/hotels", params={"city": "Goa", "adults": "0"})

    assert resp.status_code == 400


@respx.mock
async def test_hotels_adults_forwarded(client):
    route = _mock_proxy(HOTELS_HTML)

    resp = await client.get("/search/hotels", params={"city": "Goa", "adults": "4"})

    assert resp.status_code == 200
    assert route.calls.last.request.url.params["url"].endswith("&adults=4")
