"""
Pytest fixtures for marshalling tests.
"""

import json

import pytest

from slider_api.domain.models import (
    ApplicationLivenessInformation,
    ComponentInformation,
    ContainerInformation,
)


@pytest.fixture
def wire_round_trip():
    """Serialize a message to bytes and parse it back into a new instance."""
    def round_trip(message):
        return type(message).FromString(message.SerializeToString())
    return round_trip


@pytest.fixture
def full_component() -> ComponentInformation:
    """Component status with every optional field set."""
    return ComponentInformation(
        name="worker",
        priority=2,
        placement_policy=4,
        actual=3,
        completed=1,
        desired=3,
        failed=1,
        releasing=0,
        requested=1,
        started=5,
        start_failed=1,
        total_requested=6,
        node_failed=1,
        preempted=2,
        failed_recently=1,
        failure_message="container exited with code 137",
        containers=("container_e01_0001", "container_e01_0002"),
    )


@pytest.fixture
def bare_component() -> ComponentInformation:
    """Component status with every optional field absent."""
    return ComponentInformation(name="master", priority=1, desired=1, actual=1)


@pytest.fixture
def full_container() -> ContainerInformation:
    """Container status with every optional field set."""
    return ContainerInformation(
        container_id="container_e01_0002",
        component="worker",
        app_version="1.2.0",
        create_time=1700000000000,
        start_time=1700000005000,
        state=3,
        released=False,
        exit_code=0,
        diagnostics="",
        host="node7.example.org",
        placement="anywhere",
        output=("stdout.txt", "stderr.txt"),
    )


@pytest.fixture
def bare_container() -> ContainerInformation:
    """Container status with every optional field absent."""
    return ContainerInformation(
        container_id="container_e01_0003",
        component="worker",
        app_version="1.2.0",
        create_time=1700000000000,
        start_time=1700000001000,
        state=1,
    )


@pytest.fixture
def liveness() -> ApplicationLivenessInformation:
    return ApplicationLivenessInformation(all_requests_satisfied=True, requests_outstanding=0)


@pytest.fixture
def conf_tree_document() -> dict:
    """A resources.json style configuration tree."""
    return {
        "schema": "http://example.org/specification/v2.0.0",
        "metadata": {"description": "test cluster"},
        "global": {
            "yarn.vcores": "1",
            "yarn.memory": 256,
            "site.security.enabled": False,
        },
        "components": {
            "master": {"yarn.role.priority": "1", "yarn.component.instances": "1"},
            "worker": {"yarn.role.priority": 2, "yarn.component.instances": "3", "yarn.memory": "512"},
        },
        "credentials": {"jceks://hdfs/user/slider/test.jceks": ["db.password"]},
    }


@pytest.fixture
def conf_tree_json(conf_tree_document) -> str:
    return json.dumps(conf_tree_document)
