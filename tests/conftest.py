"""Shared pytest fixtures"""

from io import StringIO
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from aws_network_tables.core.logging import logger
from aws_network_tables.plugin import QueryContext
from tests.fixtures.attachments import ACCOUNT_ID, make_attachment


@pytest.fixture
def mock_console():
    """Create a console that captures output"""
    output = StringIO()
    console = Console(file=output, width=200)
    console._output = output
    return console


@pytest.fixture
def aws_clients():
    """Client factory handing out one mock per (service, region)"""
    clients = {}

    def factory(service, region_name=None, **kwargs):
        key = (service, region_name)
        if key not in clients:
            client = MagicMock(name=f"{service}:{region_name}")
            if service == "sts":
                client.get_caller_identity.return_value = {
                    "Account": ACCOUNT_ID,
                    "Arn": f"arn:aws:iam::{ACCOUNT_ID}:user/tester",
                    "UserId": "AIDATEST",
                }
            clients[key] = client
        return clients[key]

    factory.clients = clients
    return factory


@pytest.fixture
def mock_session(aws_clients):
    """Mock boto3 session in eu-west-1"""
    session = MagicMock()
    session.region_name = "eu-west-1"
    session.client.side_effect = aws_clients
    return session


@pytest.fixture
def ec2(aws_clients):
    """EC2 client for eu-west-1"""
    return aws_clients("ec2", region_name="eu-west-1")


@pytest.fixture
def sts(aws_clients):
    return aws_clients("sts", region_name="eu-west-1")


@pytest.fixture
def ctx(mock_session):
    return QueryContext(session=mock_session, regions=["eu-west-1"])


@pytest.fixture
def sample_attachment():
    return make_attachment(
        "tgw-attach-0123",
        tags=[{"Key": "Name", "Value": "prod-vpc"}, {"Key": "env", "Value": "prod"}],
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to streams that close after each test."""
    yield
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
