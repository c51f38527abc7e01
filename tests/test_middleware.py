"""
Tests for the request logging middleware
"""

import pytest

from foodgraph.middleware import operation_name_from_payload


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"operationName": "FoodById", "query": "query X { getUnits { id } }"}, "FoodById"),
        ({"query": "query Units { getUnits { id } }"}, "Units"),
        ({"query": "{ getUnits { id } }"}, "unnamed_operation"),
        ({"query": "query IntrospectionQuery { __schema { types { name } } }"}, "__introspection"),
        ({"query": ""}, None),
        ({}, None),
        (["not", "a", "dict"], None),
    ],
)
def test_operation_name_from_payload(payload, expected):
    assert operation_name_from_payload(payload) == expected


@pytest.mark.asyncio
async def test_response_carries_generated_request_id(graphql_client):
    response = await graphql_client.post("/graphql", json={"query": "{ getUnits { id } }"})

    assert response.status_code == 200
    assert len(response.headers["X-Request-ID"]) == 16


@pytest.mark.asyncio
async def test_caller_request_id_is_reused(graphql_client):
    response = await graphql_client.post(
        "/graphql",
        json={"query": "{ getUnits { id } }"},
        headers={"X-Request-ID": "trace-42"},
    )

    assert response.headers["X-Request-ID"] == "trace-42"


@pytest.mark.asyncio
async def test_unsafe_request_id_is_replaced(graphql_client):
    response = await graphql_client.post(
        "/graphql",
        json={"query": "{ getUnits { id } }"},
        headers={"X-Request-ID": "bad id with spaces"},
    )

    assert response.headers["X-Request-ID"] != "bad id with spaces"
