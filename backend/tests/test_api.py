import re
from datetime import datetime, timedelta, timezone

from app.main import app
from app.ports.counter_port import ReferenceCounterPort
from app.ports.job_port import JobPort
from app.utils.dependencies import get_job_repository, get_reference_counter


class BrokenCounter(ReferenceCounterPort):
    async def increment(self) -> int:
        raise ConnectionError("store unreachable")


class BrokenJobs(JobPort):
    async def create_job(self, data):
        raise ConnectionError("store unreachable")

    async def list_jobs(self):
        raise ConnectionError("store unreachable")

    async def update_job(self, job_id, data):
        raise ConnectionError("store unreachable")

    async def delete_job(self, job_id):
        raise ConnectionError("store unreachable")


# --- reference numbers ---

async def test_reference_numbers_from_fresh_state(client):
    today = datetime.now()
    first = await client.post("/api/reference")
    second = await client.post("/api/reference")

    assert first.status_code == 200
    assert first.json() == {"reference_number": f"001/{today:%m}/{today:%Y}"}
    assert second.json() == {"reference_number": f"002/{today:%m}/{today:%Y}"}


async def test_reference_number_format(client):
    response = await client.post("/api/reference")
    assert re.fullmatch(r"\d{3}/\d{2}/\d{4}", response.json()["reference_number"])


async def test_reference_store_failure_returns_500(client):
    app.dependency_overrides[get_reference_counter] = lambda: BrokenCounter()
    response = await client.post("/api/reference")
    assert response.status_code == 500
    assert response.json() == {"error": "Error generating reference number"}


# --- jobs ---

async def test_job_lifecycle(client):
    created = await client.post(
        "/api/jobs",
        json={"title": "Welder", "description": "MIG/TIG", "location": "Leeds", "icon": "w.png"},
    )
    assert created.status_code == 201
    job = created.json()
    assert job["title"] == "Welder"
    assert job["datePosted"]
    job_id = job["_id"]

    listed = (await client.get("/api/jobs")).json()
    assert [j["_id"] for j in listed] == [job_id]

    updated = await client.put(f"/api/jobs/{job_id}", json={"location": "York"})
    assert updated.status_code == 200
    assert updated.json()["location"] == "York"
    assert updated.json()["title"] == "Welder"
    assert updated.json()["description"] == "MIG/TIG"

    deleted = await client.delete(f"/api/jobs/{job_id}")
    assert deleted.json() == {"message": "Job deleted"}
    assert (await client.get("/api/jobs")).json() == []


async def test_date_posted_round_trips_as_utc(client):
    created = await client.post(
        "/api/jobs", json={"title": "Welder", "datePosted": "2024-01-01T09:00:00+05:00"}
    )
    listed = (await client.get("/api/jobs")).json()

    assert created.json()["datePosted"] == "2024-01-01T04:00:00Z"
    assert listed[0]["datePosted"] == "2024-01-01T04:00:00Z"


async def test_default_date_posted_carries_utc_marker(client):
    created = (await client.post("/api/jobs", json={"title": "Welder"})).json()
    listed = (await client.get("/api/jobs")).json()

    assert created["datePosted"].endswith("Z")
    assert listed[0]["datePosted"].endswith("Z")


async def test_create_job_ignores_unknown_fields(client):
    response = await client.post("/api/jobs", json={"title": "Welder", "salary": 100})
    assert response.status_code == 201
    assert "salary" not in response.json()


async def test_list_jobs_empty(client):
    response = await client.get("/api/jobs")
    assert response.status_code == 200
    assert response.json() == []


async def test_update_unknown_job_returns_404(client):
    response = await client.put("/api/jobs/5f2b6c3e9d1a4b0012345678", json={"title": "x"})
    assert response.status_code == 404
    assert response.json() == {"error": "Job not found"}


async def test_update_malformed_id_returns_404(client):
    response = await client.put("/api/jobs/not-an-id", json={"title": "x"})
    assert response.status_code == 404


async def test_delete_unknown_job_still_succeeds(client):
    response = await client.delete("/api/jobs/5f2b6c3e9d1a4b0012345678")
    assert response.status_code == 200
    assert response.json() == {"message": "Job deleted"}


async def test_job_store_failures_return_500(client):
    app.dependency_overrides[get_job_repository] = lambda: BrokenJobs()

    create = await client.post("/api/jobs", json={"title": "Welder"})
    listing = await client.get("/api/jobs")
    update = await client.put("/api/jobs/5f2b6c3e9d1a4b0012345678", json={"title": "x"})
    delete = await client.delete("/api/jobs/5f2b6c3e9d1a4b0012345678")

    assert (create.status_code, create.json()) == (500, {"error": "Error saving job"})
    assert (listing.status_code, listing.json()) == (500, {"error": "Error fetching jobs"})
    assert (update.status_code, update.json()) == (500, {"error": "Error updating job"})
    assert (delete.status_code, delete.json()) == (500, {"error": "Error deleting job"})


# --- register / login ---

async def test_register_and_login(client):
    registered = await client.post("/api/register", json={"username": "alice", "password": "s3cret"})
    assert registered.status_code == 201
    assert registered.json() == {"message": "User registered successfully"}

    login = await client.post("/api/login", json={"username": "alice", "password": "s3cret"})
    assert login.status_code == 200
    assert login.json() == {"message": "Login successful", "user": {"username": "alice"}}


async def test_register_duplicate_username_fails(client):
    payload = {"username": "alice", "password": "s3cret"}
    await client.post("/api/register", json=payload)
    response = await client.post("/api/register", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Error registering user"}


async def test_login_failures_are_indistinguishable(client):
    await client.post("/api/register", json={"username": "alice", "password": "s3cret"})

    wrong_password = await client.post("/api/login", json={"username": "alice", "password": "nope"})
    unknown_user = await client.post("/api/login", json={"username": "bob", "password": "s3cret"})

    assert wrong_password.status_code == unknown_user.status_code == 400
    assert wrong_password.json() == unknown_user.json() == {"error": "Invalid username or password"}


async def test_malformed_credentials_payload_returns_400(client):
    response = await client.post("/api/register", json={"username": "alice"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request payload"}


# --- visitor count ---

async def test_visitor_count_starts_at_905_and_holds_within_the_hour(client):
    first = await client.get("/api/visitorCount")
    second = await client.get("/api/visitorCount")
    assert first.json() == {"visitorCount": 905}
    assert second.json() == {"visitorCount": 905}


async def test_visitor_count_increments_after_an_hour(client, mongo_db):
    await client.get("/api/visitorCount")
    await mongo_db["visitor_counters"].update_one(
        {"key": "visitors"},
        {"$set": {"lastUpdated": datetime.now(timezone.utc) - timedelta(hours=1, minutes=1)}},
    )

    assert (await client.get("/api/visitorCount")).json() == {"visitorCount": 906}
    assert (await client.get("/api/visitorCount")).json() == {"visitorCount": 906}


# --- misc ---

async def test_root(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["message"] == "Job Board API"


async def test_unknown_route_uses_error_shape(client):
    response = await client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
