"""Endpoint definitions for the pages, databases, blocks, search and users APIs.

Params conventions:
    - ``page_id`` / ``database_id`` / ``block_id``: path identifiers
    - ``body``: JSON body already serialized from a request model
"""

from __future__ import annotations

from typing import Any

from ..runtime.rest import RestEndpointSpec


def _id(params: dict[str, Any], key: str) -> str:
    value = params.get(key)
    if not value or not str(value).strip():
        raise ValueError(f"{key} must be a non-empty string")
    return str(value).strip()


def _body(params: dict[str, Any]) -> dict[str, Any]:
    return dict(params.get("body") or {})


def _query_body(params: dict[str, Any]) -> dict[str, Any]:
    body: dict[str, Any] = {}
    for key in ("filter", "sorts", "sort", "query"):
        if params.get(key) is not None:
            body[key] = params[key]
    return body


RETRIEVE_PAGE = RestEndpointSpec(
    id="retrieve_page",
    method="GET",
    build_path=lambda p: f"/pages/{_id(p, 'page_id')}",
)

CREATE_PAGE = RestEndpointSpec(
    id="create_page",
    method="POST",
    build_path=lambda p: "/pages",
    build_body=_body,
)

UPDATE_PAGE = RestEndpointSpec(
    id="update_page",
    method="PATCH",
    build_path=lambda p: f"/pages/{_id(p, 'page_id')}",
    build_body=_body,
)

CREATE_DATABASE = RestEndpointSpec(
    id="create_database",
    method="POST",
    build_path=lambda p: "/databases",
    build_body=_body,
)

APPEND_BLOCK_CHILDREN = RestEndpointSpec(
    id="append_block_children",
    method="PATCH",
    build_path=lambda p: f"/blocks/{_id(p, 'block_id')}/children",
    build_body=_body,
)

QUERY_DATABASE = RestEndpointSpec(
    id="query_database",
    method="POST",
    build_path=lambda p: f"/databases/{_id(p, 'database_id')}/query",
    build_body=_query_body,
    paginated=True,
)

LIST_BLOCK_CHILDREN = RestEndpointSpec(
    id="list_block_children",
    method="GET",
    build_path=lambda p: f"/blocks/{_id(p, 'block_id')}/children",
    paginated=True,
)

SEARCH = RestEndpointSpec(
    id="search",
    method="POST",
    build_path=lambda p: "/search",
    build_body=_query_body,
    paginated=True,
)

LIST_USERS = RestEndpointSpec(
    id="list_users",
    method="GET",
    build_path=lambda p: "/users",
    paginated=True,
)
