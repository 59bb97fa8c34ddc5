"""
Tests for animal endpoints.
"""


def create_animal(client, name, animal_type):
    response = client.post(
        "/animals",
        json={"name": name, "type": animal_type, "mood": None, "habitat": None}
    )
    assert response.status_code == 201
    return response


def create_habitat(client, name, terrain_type):
    response = client.post("/habitats", json={"name": name, "terrainType": terrain_type})
    assert response.status_code == 201
    return response


def move(client, name, habitat_name):
    return client.post(f"/animals/{name}/move", content=habitat_name)


def test_create_then_list(client):
    """Test a new animal is listed unhappy and homeless."""
    create_animal(client, "monkey", "WALKING")

    response = client.get("/animals")
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 1
    assert body[0]["name"] == "monkey"
    assert body[0]["type"] == "WALKING"
    assert body[0]["mood"] == "UNHAPPY"
    assert body[0]["habitat"] is None


def test_create_ignores_mood_and_habitat(client):
    """Test mood and habitat in the creation body have no effect."""
    response = client.post(
        "/animals",
        json={
            "name": "eagle",
            "type": "FLYING",
            "mood": "HAPPY",
            "habitat": {"name": "Sky", "terrainType": "AVIARY"}
        }
    )
    assert response.status_code == 201
    assert response.json()["mood"] == "UNHAPPY"
    assert response.json()["habitat"] is None


def test_create_conflict(client):
    """Test creating a duplicate name is rejected and stores nothing new."""
    create_animal(client, "monkey", "WALKING")

    response = client.post("/animals", json={"name": "monkey", "type": "FLYING"})
    assert response.status_code == 409

    body = client.get("/animals").json()
    assert [a["name"] for a in body] == ["monkey"]
    assert body[0]["type"] == "WALKING"


def test_create_invalid_body(client):
    """Test unknown types and blank names fail validation."""
    assert client.post("/animals", json={"name": "rock", "type": "ROLLING"}).status_code == 422
    assert client.post("/animals", json={"name": "   ", "type": "WALKING"}).status_code == 422
    assert client.get("/animals").json() == []


def test_get_animal(client):
    """Test fetching a single animal by name."""
    create_animal(client, "whale", "SWIMMING")

    response = client.get("/animals/whale")
    assert response.status_code == 200
    assert response.json()["type"] == "SWIMMING"

    assert client.get("/animals/kraken").status_code == 404


def test_feed(client):
    """Test feeding makes an animal happy, and feeding again is harmless."""
    create_animal(client, "monkey", "WALKING")

    response = client.post("/animals/monkey/feed")
    assert response.status_code == 200
    assert response.json()["mood"] == "HAPPY"

    assert client.post("/animals/monkey/feed").status_code == 200

    body = client.get("/animals").json()
    assert body[0]["name"] == "monkey"
    assert body[0]["mood"] == "HAPPY"


def test_feed_not_found(client):
    """Test feeding an unknown animal."""
    response = client.post("/animals/ghost/feed")
    assert response.status_code == 404


def test_move(client):
    """Test moving an animal into a compatible, empty habitat."""
    create_animal(client, "monkey", "WALKING")
    create_habitat(client, "Monkey's Jungle", "FOREST")

    response = move(client, "monkey", "Monkey's Jungle")
    assert response.status_code == 200

    body = client.get("/animals").json()
    assert body[0]["name"] == "monkey"
    assert body[0]["habitat"] == {"name": "Monkey's Jungle", "terrainType": "FOREST"}

    habitat = client.get("/habitats/Monkey's Jungle").json()
    assert habitat["resident"] == "monkey"


def test_move_accepts_json_string(client):
    """Test a JSON string body is unwrapped when sent as JSON."""
    create_animal(client, "monkey", "WALKING")
    create_habitat(client, "Jungle", "FOREST")

    response = client.post("/animals/monkey/move", json="Jungle")
    assert response.status_code == 200
    assert response.json()["habitat"]["name"] == "Jungle"


def test_move_empty_body(client):
    """Test a move without a habitat name."""
    create_animal(client, "monkey", "WALKING")

    response = move(client, "monkey", "  ")
    assert response.status_code == 400


def test_move_incompatible(client):
    """Test an incompatible move is rejected and upsets the animal."""
    create_animal(client, "eagle", "FLYING")
    client.post("/animals/eagle/feed")
    create_habitat(client, "Monkey's Jungle", "FOREST")

    response = move(client, "eagle", "Monkey's Jungle")
    assert response.status_code == 409

    body = client.get("/animals").json()
    assert body[0]["name"] == "eagle"
    assert body[0]["mood"] == "UNHAPPY"
    assert body[0]["habitat"] is None

    habitat = client.get("/habitats/Monkey's Jungle").json()
    assert habitat["resident"] is None


def test_move_occupied(client):
    """Test moving into an occupied habitat changes nothing."""
    create_animal(client, "monkey", "WALKING")
    create_animal(client, "chimp", "WALKING")
    create_habitat(client, "Monkey's Jungle", "FOREST")
    assert move(client, "chimp", "Monkey's Jungle").status_code == 200
    client.post("/animals/monkey/feed")

    response = move(client, "monkey", "Monkey's Jungle")
    assert response.status_code == 409

    body = client.get("/animals").json()
    assert body[0]["name"] == "monkey"
    assert body[0]["habitat"] is None
    assert body[0]["mood"] == "HAPPY"
    assert body[1]["name"] == "chimp"
    assert body[1]["habitat"]["name"] == "Monkey's Jungle"
    assert body[1]["mood"] == "UNHAPPY"


def test_move_not_found(client):
    """Test moves naming an unknown animal or habitat."""
    create_animal(client, "monkey", "WALKING")
    create_habitat(client, "Jungle", "FOREST")

    assert move(client, "ghost", "Jungle").status_code == 404
    assert move(client, "monkey", "Atlantis").status_code == 404


def test_move_between_habitats(client):
    """Test relocating frees the habitat the animal left."""
    create_animal(client, "camel", "WALKING")
    create_habitat(client, "Dunes", "DESERT")
    create_habitat(client, "Savanna", "GRASSLAND")

    assert move(client, "camel", "Dunes").status_code == 200
    assert move(client, "camel", "Savanna").status_code == 200

    assert client.get("/animals/camel").json()["habitat"]["name"] == "Savanna"
    assert client.get("/habitats/Dunes").json()["resident"] is None
    assert client.get("/habitats/Savanna").json()["resident"] == "camel"


def test_fetch_with_params(client):
    """Test mood and type filters combine."""
    for name, animal_type in [
        ("monkey", "WALKING"),
        ("eagle", "FLYING"),
        ("whale", "SWIMMING"),
        ("chimp", "WALKING"),
    ]:
        create_animal(client, name, animal_type)
    client.post("/animals/chimp/feed")
    client.post("/animals/eagle/feed")

    response = client.get("/animals?mood=HAPPY&type=WALKING")
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 1
    assert body[0]["name"] == "chimp"
    assert body[0]["mood"] == "HAPPY"
    assert body[0]["type"] == "WALKING"

    happy = client.get("/animals", params={"mood": "HAPPY"}).json()
    assert [a["name"] for a in happy] == ["eagle", "chimp"]

    walking = client.get("/animals", params={"type": "WALKING"}).json()
    assert [a["name"] for a in walking] == ["monkey", "chimp"]


def test_fetch_invalid_filter(client):
    """Test unknown filter values are rejected."""
    assert client.get("/animals?mood=ECSTATIC").status_code == 422


def test_list_preserves_insertion_order(client):
    """Test listing returns animals in the order they were created."""
    names = ["zebra", "aardvark", "moose", "bee"]
    for name in names:
        create_animal(client, name, "WALKING")

    assert [a["name"] for a in client.get("/animals").json()] == names


def test_example_scenario(client):
    """Test create, feed, then house a monkey."""
    create_animal(client, "monkey", "WALKING")
    client.post("/animals/monkey/feed")
    assert client.get("/animals").json()[0]["mood"] == "HAPPY"

    create_habitat(client, "Jungle", "FOREST")
    assert move(client, "monkey", "Jungle").status_code == 200
    assert client.get("/animals").json()[0]["habitat"]["name"] == "Jungle"


def test_move_documents_plain_text_body(client):
    """Test the move endpoint advertises its raw habitat name body."""
    schema = client.get("/openapi.json").json()
    body = schema["paths"]["/animals/{name}/move"]["post"]["requestBody"]
    assert body["content"]["text/plain"]["schema"] == {"type": "string"}
