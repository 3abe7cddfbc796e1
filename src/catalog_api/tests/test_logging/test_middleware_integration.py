import json
import logging

from fastapi import FastAPI
from starlette.testclient import TestClient

from catalog_api.config.settings import Settings
from catalog_api.core.logging.builder import setup_logging
from catalog_api.core.logging.middleware import RequestIDMiddleware


def test_request_id_in_response_and_logs(tmp_path, capsys, restore_logging):
    settings = Settings(
        LOG_FORMAT="json",
        LOG_LEVEL="INFO",
        LOG_TO_STDOUT=True,
        LOG_DIR=tmp_path / "logs",
        ENV="production",
    )
    setup_logging(settings)

    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/hello")
    def hello():
        logging.getLogger("catalog_api").info("handling hello")
        return {"ok": True}

    client = TestClient(app)
    resp = client.get("/hello")
    assert resp.status_code == 200

    rid = resp.headers.get("X-Request-ID")
    assert rid

    stderr = capsys.readouterr().err.strip()
    assert stderr, "Expected log lines on stderr"

    records = []
    for line in stderr.splitlines():
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError:
            continue

    handled = [r for r in records if r.get("message") == "handling hello"]
    access = [r for r in records if r.get("message") == "http.request"]

    assert handled and handled[0]["request_id"] == rid
    assert access and access[0]["status_code"] == 200
    assert access[0]["path"] == "/hello"
    assert access[0]["method"] == "GET"
