from tests.fakes import POSTED, integrity_error

JOB_ROW = {
    "id": 7,
    "title": "Engineer",
    "salary": 100000.0,
    "equity": 0.1,
    "date_posted": POSTED,
    "company_handle": "acme",
}

NEW_JOB = {"title": "Engineer", "salary": 100000, "equity": 0.1, "company_handle": "acme"}


def test_list_jobs(client, conn, user_headers):
    conn.push([{"id": 7, "title": "Engineer", "company_handle": "acme"}])

    response = client.get("/jobs", params={"min_salary": 50000}, headers=user_headers)

    assert response.status_code == 200
    assert response.json() == {
        "jobs": [{"id": 7, "title": "Engineer", "company_handle": "acme"}]
    }
    assert conn.last_params == [50000.0]


def test_list_jobs_requires_login(client, conn):
    assert client.get("/jobs").status_code == 401
    assert conn.calls == []


def test_equity_filter_out_of_range(client, conn, user_headers):
    response = client.get("/jobs", params={"min_equity": 2}, headers=user_headers)

    assert response.status_code == 400
    assert conn.calls == []


def test_get_job(client, conn, user_headers):
    conn.push([{
        **JOB_ROW,
        "company_name": "Acme Corp",
        "company_num_employees": 50,
        "company_description": None,
        "company_logo_url": None,
    }])

    response = client.get("/jobs/7", headers=user_headers)

    assert response.status_code == 200
    job = response.json()["job"]
    assert job["id"] == 7
    assert job["company"]["handle"] == "acme"
    assert "company_handle" not in job


def test_get_job_with_non_numeric_id(client, conn, user_headers):
    response = client.get("/jobs/abc", headers=user_headers)

    assert response.status_code == 400
    assert conn.calls == []


def test_get_unknown_job(client, conn, user_headers):
    conn.push([])

    response = client.get("/jobs/99", headers=user_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "No job with id 99"


def test_create_job(client, conn, admin_headers):
    conn.push([JOB_ROW])

    response = client.post("/jobs", json=NEW_JOB, headers=admin_headers)

    assert response.status_code == 201
    assert response.json()["job"]["id"] == 7
    assert conn.last_params == ["Engineer", 100000.0, 0.1, "acme"]


def test_create_job_requires_admin(client, conn, user_headers):
    response = client.post("/jobs", json=NEW_JOB, headers=user_headers)

    assert response.status_code == 401
    assert conn.calls == []


def test_create_job_with_too_much_equity(client, conn, admin_headers):
    response = client.post(
        "/jobs", json={**NEW_JOB, "equity": 1.5}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["message"].startswith("equity")
    assert conn.calls == []


def test_create_job_for_unknown_company(client, conn, admin_headers):
    conn.push(integrity_error(
        "23503", detail='Key (company_handle)=(nope) is not present in table "companies".'
    ))

    response = client.post(
        "/jobs", json={**NEW_JOB, "company_handle": "nope"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json() == {"status": 400, "message": "No company with handle 'nope'"}


def test_update_job(client, conn, admin_headers):
    conn.push([{**JOB_ROW, "title": "Lead"}])

    response = client.patch("/jobs/7", json={"title": "Lead"}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["job"]["title"] == "Lead"


def test_job_cannot_move_to_another_company(client, conn, admin_headers):
    response = client.patch(
        "/jobs/7", json={"company_handle": "globex"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert conn.calls == []


def test_delete_job(client, conn, admin_headers):
    conn.push([{"id": 7}])

    response = client.delete("/jobs/7", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Job deleted"}


def test_job_id_beyond_integer_range(client, conn, user_headers):
    response = client.get("/jobs/3000000000", headers=user_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "No job with id 3000000000"
    assert conn.calls == []
