def test_pokemons_create_list_get_patch_delete(client):
    payload = {
        "name": "Charmander",
        "type": "Fire",
        "attack": 15,
        "defense": 10,
        "health": 15,
        "special_attack": 15,
        "special_defense": 5,
        "speed": 15,
    }

    # create
    r = client.post("/pokemons", json=payload)
    assert r.status_code == 201, r.text
    assert r.json() == {"created": True}

    # list
    r = client.get("/pokemons")
    assert r.status_code == 200
    items = r.json()
    assert len(items) == 1
    pid = items[0]["id"]
    assert items[0]["type"] == "Fire"

    # get by id
    r = client.get(f"/pokemons/{pid}")
    assert r.status_code == 200
    one = r.json()
    assert one["name"] == "Charmander"
    assert one["special_defense"] == 5

    # patch (только статы, имя не трогаем)
    r = client.patch(f"/pokemons/{pid}", json={"attack": 35, "speed": 25})
    assert r.status_code == 200, r.text
    upd = r.json()
    assert upd["name"] == "Charmander"
    assert upd["attack"] == 35
    assert upd["speed"] == 25
    assert upd["defense"] == 10

    # put (переименование)
    r = client.put(f"/pokemons/{pid}", json={"name": "Charmeleon", "health": 58})
    assert r.status_code == 200, r.text
    assert r.json()["name"] == "Charmeleon"
    assert r.json()["health"] == 58

    # delete
    r = client.delete(f"/pokemons/{pid}")
    assert r.status_code == 200
    assert r.json() == {"deleted": True}

    r = client.get(f"/pokemons/{pid}")
    assert r.status_code == 404

    r = client.delete(f"/pokemons/{pid}")
    assert r.status_code == 200
    assert r.json() == {"deleted": False}
