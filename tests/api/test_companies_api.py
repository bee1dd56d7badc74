from tests.fakes import POSTED, unique_violation

ACME = {
    "handle": "acme",
    "name": "Acme Corp",
    "num_employees": 50,
    "description": "Anvils",
    "logo_url": None,
}


def test_listing_requires_login(client, conn):
    response = client.get("/companies")

    assert response.status_code == 401
    assert response.json() == {"status": 401, "message": "Not authorized"}
    assert conn.calls == []


def test_invalid_token_is_treated_as_anonymous(client, conn):
    response = client.get("/companies", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert conn.calls == []


def test_list_companies(client, conn, user_headers):
    conn.push([{"handle": "acme", "name": "Acme Corp"}])

    response = client.get("/companies", headers=user_headers)

    assert response.status_code == 200
    assert response.json() == {"companies": [{"handle": "acme", "name": "Acme Corp"}]}


def test_list_companies_with_filters(client, conn, user_headers):
    conn.push([])

    response = client.get(
        "/companies",
        params={"search": "ac", "min_employees": 10},
        headers=user_headers,
    )

    assert response.status_code == 200
    assert conn.last_params == ["%ac%", 10]


def test_inverted_employee_range(client, conn, user_headers):
    response = client.get(
        "/companies",
        params={"min_employees": 200, "max_employees": 100},
        headers=user_headers,
    )

    assert response.status_code == 400
    assert response.json()["message"] == "min_employees cannot be greater than max_employees"
    assert conn.calls == []


def test_non_numeric_filter(client, conn, user_headers):
    response = client.get(
        "/companies", params={"min_employees": "lots"}, headers=user_headers
    )

    assert response.status_code == 400
    assert response.json()["status"] == 400
    assert response.json()["message"].startswith("query.min_employees")


def test_get_company_with_jobs(client, conn, user_headers):
    conn.push([{
        **ACME,
        "job_id": 1,
        "job_title": "Engineer",
        "job_salary": 100000.0,
        "job_equity": 0.1,
        "job_date_posted": POSTED,
    }])

    response = client.get("/companies/acme", headers=user_headers)

    assert response.status_code == 200
    company = response.json()["company"]
    assert company["handle"] == "acme"
    assert [job["id"] for job in company["jobs"]] == [1]
    assert company["jobs"][0]["title"] == "Engineer"


def test_get_unknown_company(client, conn, user_headers):
    conn.push([])

    response = client.get("/companies/nope", headers=user_headers)

    assert response.status_code == 404
    assert response.json() == {"status": 404, "message": "No company with handle 'nope'"}


def test_create_requires_admin(client, conn, user_headers):
    response = client.post("/companies", json=ACME, headers=user_headers)

    assert response.status_code == 401
    assert conn.calls == []


def test_create_company(client, conn, admin_headers):
    conn.push([ACME])

    response = client.post("/companies", json=ACME, headers=admin_headers)

    assert response.status_code == 201
    assert response.json() == {"company": ACME}


def test_create_ignores_reserved_fields(client, conn, admin_headers):
    conn.push([ACME])

    response = client.post(
        "/companies", json={**ACME, "_token": "abc"}, headers=admin_headers
    )

    assert response.status_code == 201
    assert "abc" not in conn.last_params


def test_create_rejects_unknown_fields(client, conn, admin_headers):
    response = client.post(
        "/companies", json={**ACME, "founded": 1999}, headers=admin_headers
    )

    assert response.status_code == 400
    assert conn.calls == []


def test_create_missing_name(client, conn, admin_headers):
    response = client.post("/companies", json={"handle": "acme"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["message"].startswith("name")


def test_create_duplicate(client, conn, admin_headers):
    conn.push(unique_violation("handle", "acme"))

    response = client.post("/companies", json=ACME, headers=admin_headers)

    assert response.status_code == 400
    assert response.json() == {
        "status": 400,
        "message": "A company with that handle already exists",
    }


def test_update_company(client, conn, admin_headers):
    conn.push([{**ACME, "name": "Acme Inc"}])

    response = client.patch(
        "/companies/acme", json={"name": "Acme Inc"}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["company"]["name"] == "Acme Inc"
    assert conn.last_query == "UPDATE companies SET name=$1 WHERE handle=$2 RETURNING *"


def test_update_with_empty_body(client, conn, admin_headers):
    response = client.patch("/companies/acme", json={}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "No fields to update"
    assert conn.calls == []


def test_update_requires_admin(client, conn, user_headers):
    response = client.patch("/companies/acme", json={"name": "X"}, headers=user_headers)

    assert response.status_code == 401


def test_delete_company(client, conn, admin_headers):
    conn.push([{"handle": "acme"}]).push([])

    first = client.delete("/companies/acme", headers=admin_headers)
    second = client.delete("/companies/acme", headers=admin_headers)

    assert first.status_code == 200
    assert first.json() == {"message": "Company deleted"}
    assert second.status_code == 404


def test_unknown_route(client):
    response = client.get("/nowhere")

    assert response.status_code == 404
    assert response.json() == {"status": 404, "message": "Not Found"}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_employee_count_beyond_integer_range(client, conn, admin_headers):
    response = client.post(
        "/companies", json={**ACME, "num_employees": 3_000_000_000}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["message"].startswith("num_employees")
    assert conn.calls == []


def test_employee_filter_beyond_integer_range(client, conn, user_headers):
    response = client.get(
        "/companies", params={"max_employees": 3_000_000_000}, headers=user_headers
    )

    assert response.status_code == 400
    assert conn.calls == []


def test_token_in_body(client, conn, admin_headers):
    conn.push([ACME])
    token = admin_headers["Authorization"].split()[1]

    response = client.post("/companies", json={**ACME, "_token": token})

    assert response.status_code == 201
    assert token not in conn.last_params


def test_token_in_query_string(client, conn, user_headers):
    conn.push([])
    token = user_headers["Authorization"].split()[1]

    response = client.get("/companies", params={"_token": token})

    assert response.status_code == 200


def test_tampered_body_token_is_anonymous(client, conn, admin_headers):
    token = admin_headers["Authorization"].split()[1]

    response = client.post("/companies", json={**ACME, "_token": token[:-2] + "xx"})

    assert response.status_code == 401
    assert conn.calls == []
