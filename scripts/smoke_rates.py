"""Smoke script walking the rate directory end to end on a throwaway database.

Sequence:
 1. List (empty), create USD->EUR, read it back.
 2. Convert 100 USD, update the rate, convert again.
 3. Exercise the error paths (unsupported code, missing pair, bad amount).
 4. Delete the pair and confirm it is gone.
"""

from fastapi.testclient import TestClient
from rate_directory.core.config import Settings
from rate_directory.main import create_app
from pathlib import Path
import tempfile
import json


def run():
    with tempfile.TemporaryDirectory() as d:
        settings = Settings(data_dir=Path(d), db_path=Path(d) / "smoke.sqlite3")
        settings.init_post_load()
        results = {}
        with TestClient(create_app(settings_override=settings)) as client:
            results["list_empty"] = client.get("/api/tasas").json()
            results["create"] = client.post(
                "/api/tasas", json={"origin": "USD", "destination": "EUR", "rate": 0.92}
            ).json()
            results["get"] = client.get("/api/tasas/USD/EUR").json()
            results["convert"] = client.get("/api/convertir/USD/EUR/100").json()
            results["update"] = client.put("/api/tasas/USD/EUR", json={"rate": 0.95}).json()
            results["convert_after_update"] = client.get("/api/convertir/USD/EUR/100").json()

            unsup = client.get("/api/tasas/USD/XYZ")
            results["unsupported"] = [unsup.status_code, unsup.json()]
            inverse = client.get("/api/tasas/EUR/USD")
            results["inverse_missing"] = [inverse.status_code, inverse.json()]
            bad_amount = client.get("/api/convertir/USD/EUR/ten")
            results["bad_amount"] = [bad_amount.status_code, bad_amount.json()]

            results["delete"] = client.delete("/api/tasas/USD/EUR").json()
            results["get_after_delete"] = client.get("/api/tasas/USD/EUR").status_code
        print(json.dumps(results, indent=2))


if __name__ == "__main__":
    run()
