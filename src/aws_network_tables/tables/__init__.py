"""Table registry"""

from typing import Callable

from thefuzz import process

from ..core import TableNotFoundError
from ..plugin import Table
from .ec2_transit_gateway_vpc_attachment import (
    table_aws_ec2_transit_gateway_vpc_attachment,
)

TABLES: dict[str, Callable[[], Table]] = {
    "aws_ec2_transit_gateway_vpc_attachment": table_aws_ec2_transit_gateway_vpc_attachment,
}


def get_table(name: str) -> Table:
    """Build a table by name, suggesting the closest match when unknown."""
    factory = TABLES.get(name)
    if factory is None:
        match = process.extractOne(name, list(TABLES), score_cutoff=60)
        raise TableNotFoundError(name, match[0] if match else None)
    return factory()


def all_tables() -> list[Table]:
    return [factory() for _, factory in sorted(TABLES.items())]
