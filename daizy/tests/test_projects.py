"""Tests for the project resource operations."""
# daizy/tests/test_projects.py
# Created: 2026-10-19 11:20:05
# Author: Daizy

import json
import pytest
from aiohttp import web
from daizy.api import (
    Project,
    ProjectListResponse,
    CreateProjectRequest,
    UpdateProjectRequest,
    ResponseError,
    DecodeError
)

PROJECT_LIST_BODY = """{
  "projects": [
    {
      "name": "aProject",
      "status": "created",
      "user_id": 0,
      "republish_mqtt": true,
      "id": 32,
      "organisation_id": 12
    }
  ],
  "total": 1,
  "columnFilters": {}
}"""

A_PROJECT = Project(
    name="aProject",
    status="created",
    user_id=0,
    republish_mqtt=True,
    id=32,
    organisation_id=12
)

@pytest.mark.asyncio
async def test_get_projects(serve, respond, received):
    """Test listing projects returns the decoded records"""
    client = await serve(web.get("/organisation/12345/projects", respond(PROJECT_LIST_BODY)))

    projects = await client.get_projects()

    assert received[0]["method"] == "GET"
    assert projects == [A_PROJECT]

@pytest.mark.asyncio
async def test_get_projects_empty(serve, respond):
    client = await serve(web.get("/organisation/12345/projects", respond('{"projects": [], "total": 0}')))

    assert await client.get_projects() == []

@pytest.mark.asyncio
async def test_get_single_project(serve, respond, received, project_body):
    client = await serve(web.get("/organisation/12345/project/32", respond(project_body)))

    project = await client.get_project(32)

    assert received[0]["method"] == "GET"
    assert project == A_PROJECT

@pytest.mark.asyncio
async def test_create_project(serve, respond, received):
    """Test creating a project sends the request body as JSON"""
    response_body = json.dumps({
        "name": "aProject",
        "status": "created",
        "user_id": 444,
        "republish_mqtt": True,
        "id": 32,
        "organisation_id": 12
    })
    client = await serve(web.post("/organisation/12345/project", respond(response_body)))

    project = await client.create_project(CreateProjectRequest(name="aProject", user_id=444))

    assert received[0]["method"] == "POST"
    assert received[0]["body"] == '{"name":"aProject","user_id":444}'
    assert project.user_id == 444
    assert project.id == 32
    assert project.name == "aProject"

@pytest.mark.asyncio
async def test_update_project(serve, respond, received):
    response_body = json.dumps({
        "name": "renamed",
        "status": "created",
        "user_id": 7,
        "republish_mqtt": False,
        "id": 32,
        "organisation_id": 12
    })
    client = await serve(web.put("/organisation/12345/project/32", respond(response_body)))

    project = await client.update_project(32, UpdateProjectRequest(name="renamed", user_id=7))

    assert received[0]["method"] == "PUT"
    assert json.loads(received[0]["body"]) == {"name": "renamed", "user_id": 7}
    assert project == Project(
        name="renamed",
        status="created",
        user_id=7,
        republish_mqtt=False,
        id=32,
        organisation_id=12
    )

@pytest.mark.asyncio
async def test_delete_project(serve, respond, received):
    client = await serve(web.delete("/organisation/12345/project/45", respond()))

    assert await client.delete_project(45) is None
    assert received[0]["method"] == "DELETE"
    assert received[0]["body"] == ""

@pytest.mark.asyncio
@pytest.mark.parametrize("call", [
    lambda c: c.get_projects(),
    lambda c: c.get_project(1),
    lambda c: c.create_project(CreateProjectRequest(name="x", user_id=1)),
    lambda c: c.update_project(1, UpdateProjectRequest(name="x", user_id=1)),
    lambda c: c.delete_project(1),
])
async def test_operations_raise_response_error(serve, respond, error_body, call):
    """Test every operation surfaces a 400 as ResponseError"""
    bad_request = respond(error_body, status=400)
    client = await serve(
        web.get("/organisation/12345/projects", bad_request),
        web.route("*", "/organisation/12345/project/1", bad_request),
        web.post("/organisation/12345/project", bad_request)
    )

    with pytest.raises(ResponseError) as exc_info:
        await call(client)

    assert str(exc_info.value) == "A numeric value is required"
    assert exc_info.value.status == 400

def test_project_ignores_unknown_fields():
    project = Project.from_dict({"name": "p", "id": 3, "extra": "ignored"})
    assert project == Project(name="p", id=3)

def test_project_list_keeps_filters():
    response = ProjectListResponse.from_dict({"projects": [], "total": 0, "columnFilters": {"status": "created"}})
    assert response.column_filters == {"status": "created"}

def test_project_list_rejects_bad_projects():
    with pytest.raises(ValueError):
        ProjectListResponse.from_dict({"projects": "nope"})

@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    '{"id": "abc"}',
    '{"user_id": null}',
    '{"republish_mqtt": "yes"}',
    '{"organisation_id": true}',
    '{"name": 7}',
])
async def test_get_project_rejects_mistyped_fields(serve, respond, body):
    """Test a body whose fields have the wrong types is a decode error"""
    client = await serve(web.get("/organisation/12345/project/1", respond(body)))

    with pytest.raises(DecodeError):
        await client.get_project(1)

@pytest.mark.asyncio
async def test_get_projects_rejects_mistyped_total(serve, respond):
    client = await serve(web.get("/organisation/12345/projects", respond('{"projects": [], "total": "1"}')))

    with pytest.raises(DecodeError):
        await client.get_projects()

@pytest.mark.parametrize("data", [
    {"id": 1.5},
    {"user_id": False},
    {"status": None},
])
def test_project_from_dict_checks_types(data):
    with pytest.raises(ValueError):
        Project.from_dict(data)
