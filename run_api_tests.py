import urllib.request
import urllib.error
import json

# Manual smoke run against a freshly seeded database:
#   alembic upgrade head && uvicorn src.main:app --port 8000
BASE = "http://localhost:8000"

def request(method, path, profile_id=None, body=None, params=None):
    url = f"{BASE}{path}"
    if params:
        url += "?" + "&".join(f"{k}={v}" for k, v in params.items())
    data = json.dumps(body).encode() if body is not None else None
    req = urllib.request.Request(url, data=data, method=method)
    req.add_header("Content-Type", "application/json")
    if profile_id is not None:
        req.add_header("profile_id", str(profile_id))
    try:
        with urllib.request.urlopen(req) as r:
            return r.status, json.loads(r.read())
    except urllib.error.HTTPError as e:
        return e.code, json.loads(e.read())

def get(path, profile_id=None, params=None):
    return request("GET", path, profile_id, params=params)

def post(path, profile_id=None, body=None):
    return request("POST", path, profile_id, body=body)

def section(title):
    print(f"\n{'='*60}")
    print(f"### {title} ###")
    print('='*60)

def label(name):
    print(f"\n--- {name} ---")

def out(result):
    status, data = result
    print(f"HTTP {status}")
    print(json.dumps(data, indent=2, ensure_ascii=False))

HARRY, MR_ROBOT, ASH, LINUS = 1, 2, 4, 6
AUGUST_2020 = {"start": "2020-08-01", "end": "2020-08-31"}

# ── Health ─────────────────────────────────────────────────────
section("HEALTH")
out(get("/health"))

# ── Identity ───────────────────────────────────────────────────
section("IDENTITY")

label("No profile_id header -> 401")
out(get("/contracts/"))

label("Unknown profile -> 401")
out(get("/contracts/", profile_id=999))

# ── Contracts ──────────────────────────────────────────────────
section("CONTRACTS")

label("Harry reads own terminated contract 1")
out(get("/contracts/1", profile_id=HARRY))

label("Harry reads Mr Robot's contract 3 -> 401")
out(get("/contracts/3", profile_id=HARRY))

label("Unknown contract -> 404")
out(get("/contracts/999", profile_id=HARRY))

label("Harry lists non-terminated contracts")
out(get("/contracts/", profile_id=HARRY))

label("Linus (contractor) lists contracts")
out(get("/contracts/", profile_id=LINUS))

# ── Jobs ───────────────────────────────────────────────────────
section("JOBS")

label("Ash lists unpaid jobs")
out(get("/jobs/unpaid", profile_id=ASH))

label("Linus pays a job -> 401 (contractors cannot pay)")
out(post("/jobs/2/pay", profile_id=LINUS))

label("Mr Robot pays Harry's job -> 401")
out(post("/jobs/2/pay", profile_id=MR_ROBOT))

label("Harry pays job 1 on a terminated contract -> 400")
out(post("/jobs/1/pay", profile_id=HARRY))

label("Harry pays job 2")
out(post("/jobs/2/pay", profile_id=HARRY))

label("Harry pays job 2 again -> 400")
out(post("/jobs/2/pay", profile_id=HARRY))

label("Ash pays job 5 with 130 cents -> 400 insufficient balance")
out(post("/jobs/5/pay", profile_id=ASH))

# ── Deposits ───────────────────────────────────────────────────
section("DEPOSITS")

label("Mr Robot deposits within 25% of unpaid jobs")
out(post(f"/balances/deposit/{MR_ROBOT}", profile_id=MR_ROBOT, body={"amount_to_deposit": 10000}))

label("Mr Robot deposits over the cap -> 400")
out(post(f"/balances/deposit/{MR_ROBOT}", profile_id=MR_ROBOT, body={"amount_to_deposit": 1000000}))

label("Harry deposits for Mr Robot -> 401")
out(post(f"/balances/deposit/{MR_ROBOT}", profile_id=HARRY, body={"amount_to_deposit": 100}))

label("Missing amount -> 400 ParamMissing")
out(post(f"/balances/deposit/{MR_ROBOT}", profile_id=MR_ROBOT, body={}))

# ── Admin ──────────────────────────────────────────────────────
section("ADMIN")

label("Best profession, August 2020")
out(get("/admin/best-profession", profile_id=HARRY, params=AUGUST_2020))

label("Best clients, default limit")
out(get("/admin/best-clients", profile_id=HARRY, params=AUGUST_2020))

label("Best clients, limit=3")
out(get("/admin/best-clients", profile_id=HARRY, params={**AUGUST_2020, "limit": 3}))

label("Missing end date -> 400 ParamMissing")
out(get("/admin/best-profession", profile_id=HARRY, params={"start": "2020-08-01"}))

label("Start after end -> 400")
out(get("/admin/best-clients", profile_id=HARRY, params={"start": "2020-09-01", "end": "2020-08-01"}))

label("Empty window -> 404")
out(get("/admin/best-profession", profile_id=HARRY, params={"start": "1999-01-01", "end": "1999-01-02"}))

print("\nDone.")
