# tests/api/test_dependencies.py
from __future__ import annotations

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from structview import ParameterMissing, Parameters, ParametersNotPermitted, destructure_keys
from structview.api.dependencies import get_parameters


def create_app() -> FastAPI:
    app = FastAPI()

    @app.exception_handler(ParametersNotPermitted)
    async def not_permitted(request: Request, exc: ParametersNotPermitted):
        return JSONResponse(status_code=403, content={"detail": str(exc)})

    @app.exception_handler(ParameterMissing)
    async def missing(request: Request, exc: ParameterMissing):
        return JSONResponse(status_code=400, content={"detail": exc.key})

    @app.post("/posts")
    async def create_post(params: Parameters = Depends(get_parameters)):
        post_params = params.require("post").permit("title", "body", "published")

        match destructure_keys(post_params):
            case {"published": True} if not params.get("editor"):
                return {"status": "forbidden"}
            case {"title": str() as title, **rest}:
                return {"status": "created", "title": title, "rest": rest}
        return {"status": "invalid"}

    @app.get("/search")
    async def search(params: Parameters = Depends(get_parameters)):
        return destructure_keys(params, ["q"])

    @app.get("/echo")
    async def echo(params: Parameters = Depends(get_parameters)):
        return destructure_keys(params.permit("q", {"tag": []}))

    return app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_body_parameters_are_permitted_then_matched(client):
    r = client.post("/posts", json={"post": {"title": "Rails", "body": "x", "admin": True}})

    assert r.status_code == 200
    assert r.json() == {"status": "created", "title": "Rails", "rest": {"body": "x"}}


def test_guard_on_destructured_value(client):
    r = client.post("/posts", json={"post": {"title": "Rails", "published": True}})

    assert r.json() == {"status": "forbidden"}


def test_query_and_body_are_merged(client):
    r = client.post(
        "/posts?editor=1",
        json={"post": {"title": "Rails", "published": True}},
    )

    assert r.json() == {"status": "created", "title": "Rails", "rest": {"published": True}}


def test_missing_required_key(client):
    r = client.post("/posts", json={"other": 1})

    assert r.status_code == 400
    assert r.json() == {"detail": "post"}


def test_unpermitted_request_parameters_are_refused(client):
    r = client.get("/search?q=rails")

    assert r.status_code == 403
    assert "Only permitted parameters" in r.json()["detail"]


def test_repeated_query_keys(client):
    r = client.get("/echo?q=rails&tag=a&tag=b&admin=1")

    assert r.status_code == 200
    assert r.json() == {"q": "rails", "tag": ["a", "b"]}


def test_invalid_json_body(client):
    r = client.post("/posts", content=b"{not json", headers={"content-type": "application/json"})

    assert r.status_code == 400
    assert "Invalid JSON body" in r.json()["detail"]


def test_non_object_json_body(client):
    r = client.post("/posts", json=[1, 2])

    assert r.status_code == 400
    assert r.json() == {"detail": "JSON body must be an object"}
