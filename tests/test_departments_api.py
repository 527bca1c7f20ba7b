def _create(client, api, name="Engineering", location="Austin", **extra):
    body = {"name": name, "location": location, **extra}
    return client.post(f"{api}/departments", json=body)


def test_create_returns_201_with_body(client, api):
    res = _create(client, api, description="Builds things")

    assert res.status_code == 201
    body = res.json()
    assert body["name"] == "Engineering"
    assert body["description"] == "Builds things"
    assert body["employeeCount"] == 0
    assert {"id", "createdAt", "updatedAt"} <= body.keys()


def test_create_duplicate_name_returns_409(client, api):
    _create(client, api)

    res = _create(client, api, location="Berlin")

    assert res.status_code == 409
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "DUPLICATE_ENTRY"
    assert body["error"]["field"] == "name"
    assert body["message"] == "Department with name 'Engineering' already exists"


def test_create_invalid_input_returns_400_with_every_field(client, api):
    res = client.post(f"{api}/departments", json={"name": "   ", "location": "x" * 101})

    assert res.status_code == 400
    body = res.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in body["error"]["details"]}
    assert fields == {"name", "location"}


def test_create_without_name_returns_400(client, api):
    res = client.post(f"{api}/departments", json={"location": "Austin"})

    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "name"


def test_get_by_id(client, api):
    created = _create(client, api).json()

    res = client.get(f"{api}/departments/{created['id']}")

    assert res.status_code == 200
    assert res.json() == created


def test_get_missing_returns_404(client, api):
    res = client.get(f"{api}/departments/999")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"
    assert res.json()["message"] == "Department not found with ID: 999"


def test_list_uses_page_envelope_and_default_name_sort(client, api):
    for name in ("Sales", "Engineering", "Marketing"):
        _create(client, api, name=name)

    first = client.get(f"{api}/departments", params={"page": 0, "size": 2}).json()
    second = client.get(f"{api}/departments", params={"page": 1, "size": 2}).json()

    assert [d["name"] for d in first["content"]] == ["Engineering", "Marketing"]
    assert first["pageNumber"] == 0
    assert first["pageSize"] == 2
    assert first["totalElements"] == 3
    assert first["totalPages"] == 2
    assert first["last"] is False
    assert [d["name"] for d in second["content"]] == ["Sales"]
    assert second["last"] is True


def test_list_defaults(client, api):
    body = client.get(f"{api}/departments").json()

    assert body["pageNumber"] == 0
    assert body["pageSize"] == 10
    assert body["content"] == []
    assert body["last"] is True


def test_list_sort_desc(client, api):
    for name in ("Sales", "Engineering"):
        _create(client, api, name=name)

    body = client.get(f"{api}/departments", params={"sortBy": "name", "sortDir": "desc"}).json()

    assert [d["name"] for d in body["content"]] == ["Sales", "Engineering"]


def test_list_unknown_sort_field_returns_400(client, api):
    res = client.get(f"{api}/departments", params={"sortBy": "budget"})

    assert res.status_code == 400
    assert res.json()["error"]["field"] == "sortBy"


def test_list_out_of_range_paging_returns_400(client, api):
    res = client.get(f"{api}/departments", params={"page": -1, "size": 0})

    assert res.status_code == 400
    fields = {d["field"] for d in res.json()["error"]["details"]}
    assert fields == {"page", "size"}


def test_search(client, api):
    _create(client, api, name="Engineering", location="Austin")
    _create(client, api, name="Sales", location="Boston")

    body = client.get(f"{api}/departments/search", params={"search": "boSTon"}).json()

    assert [d["name"] for d in body["content"]] == ["Sales"]
    assert body["totalElements"] == 1


def test_search_requires_keyword(client, api):
    res = client.get(f"{api}/departments/search")

    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "search"


def test_list_all(client, api):
    for i in range(11):
        _create(client, api, name=f"Dept {i}")

    res = client.get(f"{api}/departments/list")

    assert res.status_code == 200
    assert len(res.json()) == 11


def test_update(client, api):
    created = _create(client, api).json()

    res = client.put(f"{api}/departments/{created['id']}", json={"name": "Platform", "location": "Denver"})

    assert res.status_code == 200
    assert res.json()["name"] == "Platform"
    assert res.json()["location"] == "Denver"
    assert res.json()["description"] is None


def test_update_conflict_and_missing(client, api):
    _create(client, api, name="Engineering")
    sales = _create(client, api, name="Sales").json()

    assert client.put(f"{api}/departments/{sales['id']}", json={"name": "Engineering"}).status_code == 409
    assert client.put(f"{api}/departments/999", json={"name": "Anything"}).status_code == 404


def test_delete(client, api):
    created = _create(client, api).json()

    res = client.delete(f"{api}/departments/{created['id']}")

    assert res.status_code == 204
    assert res.content == b""
    assert client.get(f"{api}/departments/{created['id']}").status_code == 404
    assert client.delete(f"{api}/departments/{created['id']}").status_code == 404


def test_delete_cascades_to_employees(client, api):
    dept = _create(client, api).json()
    emp = client.post(f"{api}/employees", json={
        "firstName": "Ada", "lastName": "Lovelace", "email": "ada@company.com", "departmentId": dept["id"],
    }).json()

    client.delete(f"{api}/departments/{dept['id']}")

    assert client.get(f"{api}/employees/{emp['id']}").status_code == 404


def test_staff_roster(client, api):
    dept = _create(client, api).json()
    client.post(f"{api}/employees", json={
        "firstName": "Ada", "lastName": "Lovelace", "email": "ada@company.com",
        "position": "Engineer", "departmentId": dept["id"],
    })

    res = client.get(f"{api}/departments/{dept['id']}/employees")

    assert res.status_code == 200
    assert res.json() == [{
        "id": 1, "firstName": "Ada", "lastName": "Lovelace", "email": "ada@company.com",
        "position": "Engineer", "departmentName": "Engineering",
    }]
    assert client.get(f"{api}/departments/999/employees").status_code == 404


def test_name_is_stored_verbatim_and_whitespace_variants_are_distinct(client, api):
    res = _create(client, api, name="Eng ")

    assert res.status_code == 201
    assert res.json()["name"] == "Eng "
    assert _create(client, api, name="Eng").status_code == 201
    assert _create(client, api, name="Eng ").status_code == 409
