# Company endpoints: listing, lookup with invoices, create/replace/delete
# and the error envelope for each failure path.

from __future__ import annotations


def test_list_companies_returns_all_rows(client, seeded) -> None:
    response = client.get("/companies")

    assert response.status_code == 200
    assert response.json() == [seeded["company"]]


def test_list_companies_on_empty_store_is_bad_request(client) -> None:
    response = client.get("/companies")

    assert response.status_code == 400
    assert response.json() == {"error": {"message": "No company data found.", "status": 400}}


def test_list_companies_after_deleting_last_company(client, seeded) -> None:
    client.delete("/companies/apple")
    response = client.get("/companies")

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "No company data found."


def test_get_company_includes_its_invoices(client, seeded) -> None:
    response = client.get("/companies/apple")

    assert response.status_code == 200
    assert response.json() == {**seeded["company"], "invoices": [seeded["invoice"]]}


def test_get_unknown_company_is_not_found(client, seeded) -> None:
    response = client.get("/companies/fizzbuzz")

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Not Found"


def test_create_company_then_fetch_it(client) -> None:
    new_company = {
        "code": "msft",
        "name": "Microsoft",
        "description": "Makes computer operating systems.",
    }
    response = client.post("/companies", json=new_company)

    assert response.status_code == 201
    assert response.json() == {"company": new_company}

    fetched = client.get("/companies/msft")
    assert fetched.status_code == 200
    assert fetched.json() == {**new_company, "invoices": []}


def test_create_company_requires_every_field(client) -> None:
    response = client.post("/companies", json={"code": "msft", "name": "Microsoft"})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Not enough data to add company."


def test_create_company_rejects_empty_strings(client) -> None:
    response = client.post("/companies", json={"code": "msft", "name": "", "description": "x"})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Not enough data to add company."


def test_create_duplicate_company_is_server_error(lenient_client, seeded) -> None:
    response = lenient_client.post("/companies", json=seeded["company"])

    assert response.status_code == 500
    assert response.json()["error"]["status"] == 500


def test_update_company(client, seeded) -> None:
    updated = {"code": "apple", "name": "Apple", "description": "Makes good stuff."}
    response = client.put("/companies/apple", json=updated)

    assert response.status_code == 200
    assert response.json() == {"company": updated}
    assert client.get("/companies/apple").json()["description"] == "Makes good stuff."


def test_update_company_can_rename_code(client, seeded) -> None:
    renamed = {"code": "aapl", "name": "Apple Inc.", "description": "Renamed."}
    response = client.put("/companies/apple", json=renamed)

    assert response.status_code == 200
    assert response.json() == {"company": renamed}
    assert client.get("/companies/apple").status_code == 404
    assert client.get("/companies/aapl").json()["name"] == "Apple Inc."


def test_update_unknown_company_is_not_found(client, seeded) -> None:
    updated = {"code": "apple", "name": "Apple", "description": "Makes good stuff."}
    response = client.put("/companies/fizzbuzz", json=updated)

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "No rows found."


def test_update_company_requires_every_field(client, seeded) -> None:
    response = client.put("/companies/apple", json={"code": "apple", "name": "Apple"})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Not enough data."


def test_update_checks_fields_before_lookup(client) -> None:
    response = client.put("/companies/fizzbuzz", json={"code": "fizzbuzz"})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Not enough data."


def test_delete_company(client, seeded) -> None:
    response = client.delete("/companies/apple")

    assert response.status_code == 200
    assert response.json() == {"status": "deleted"}


def test_delete_company_twice_is_not_found(client, seeded) -> None:
    client.delete("/companies/apple")
    response = client.delete("/companies/apple")

    assert response.status_code == 404
    assert response.json() == {"error": {"message": "Company not found.", "status": 404}}
