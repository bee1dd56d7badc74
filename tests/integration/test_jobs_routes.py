async def test_get_job_nests_company(api, acme_job, user_headers):
    response = await api.get(f"/jobs/{acme_job['id']}", headers=user_headers)

    assert response.status_code == 200
    job = response.json()["job"]
    assert job["title"] == "Engineer"
    assert job["date_posted"]
    assert job["company"] == {
        "handle": "acme",
        "name": "Acme Corp",
        "num_employees": 50,
        "description": "Anvils",
        "logo_url": None,
    }


async def test_company_lists_its_jobs(api, acme_job, user_headers):
    response = await api.get("/companies/acme", headers=user_headers)

    assert [job["id"] for job in response.json()["company"]["jobs"]] == [acme_job["id"]]


async def test_job_for_unknown_company(api, admin_headers):
    response = await api.post(
        "/jobs", json={"title": "Engineer", "company_handle": "nope"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json() == {"status": 400, "message": "No company with handle 'nope'"}


async def test_filters(api, acme, admin_headers, user_headers):
    for title, salary, equity in [("Engineer", 120000, 0.1), ("Intern", 20000, 0), ("Designer", 90000, 0.05)]:
        await api.post(
            "/jobs",
            json={"title": title, "salary": salary, "equity": equity, "company_handle": "acme"},
            headers=admin_headers,
        )

    paid = await api.get("/jobs", params={"min_salary": 50000}, headers=user_headers)
    equity = await api.get("/jobs", params={"min_equity": 0.06}, headers=user_headers)
    search = await api.get("/jobs", params={"search": "GN"}, headers=user_headers)

    assert [j["title"] for j in paid.json()["jobs"]] == ["Engineer", "Designer"]
    assert [j["title"] for j in equity.json()["jobs"]] == ["Engineer"]
    assert [j["title"] for j in search.json()["jobs"]] == ["Designer"]


async def test_update_job(api, acme_job, admin_headers):
    response = await api.patch(
        f"/jobs/{acme_job['id']}", json={"salary": 110000}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["job"]["salary"] == 110000
    assert response.json()["job"]["title"] == "Engineer"


async def test_job_id_beyond_integer_range(api, user_headers):
    response = await api.get("/jobs/3000000000", headers=user_headers)

    assert response.status_code == 404
