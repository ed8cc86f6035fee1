"""Helpers shared by every AWS table"""

from typing import Callable, Optional

from botocore.exceptions import ClientError

from ..core import get_logger
from ..models import Tag
from ..plugin import Column, ColumnType, FromHydrate, FromTransform, QueryContext

logger = get_logger("aws")

_STANDARD_DESCRIPTIONS = {
    "akas": "Array of globally unique identifier strings (also known as) for the resource.",
    "tags": "A map of tags for the resource.",
    "title": "Title of the resource.",
}


def resource_interface_description(name: str) -> str:
    return _STANDARD_DESCRIPTIONS.get(name, "")


def aws_regional_columns(columns: list[Column]) -> list[Column]:
    """Append the partition, region and account_id columns."""
    return columns + [
        Column(
            "partition",
            ColumnType.STRING,
            "The AWS partition in which the resource is located (aws, aws-cn, or aws-us-gov).",
            FromHydrate(lambda row: row.ctx.common_columns().partition),
        ),
        Column(
            "region",
            ColumnType.STRING,
            "The AWS Region in which the resource is located.",
            FromTransform(lambda row: row.region),
        ),
        Column(
            "account_id",
            ColumnType.STRING,
            "The AWS Account ID in which the resource is located.",
            FromHydrate(lambda row: row.ctx.common_columns().account_id),
        ),
    ]


def ec2_tags_to_map(tags: Optional[list[Tag]]) -> Optional[dict[str, str]]:
    """Convert an EC2 tag list to a dict. Later duplicates overwrite earlier ones."""
    if tags is None:
        return None
    return {t.key: t.value for t in tags}


def error_code(err: Exception) -> Optional[str]:
    if isinstance(err, ClientError):
        return err.response.get("Error", {}).get("Code")
    return None


def is_not_found_error(codes: list[str]) -> Callable[[Exception], bool]:
    """Build a predicate matching ClientErrors whose code is one of codes."""
    not_found = frozenset(codes)

    def predicate(err: Exception) -> bool:
        return error_code(err) in not_found

    return predicate


def build_region_list(ctx: QueryContext) -> list[str]:
    """Regions a query fans out over.

    Configured regions win; otherwise every region enabled for the account,
    falling back to the session's own region if DescribeRegions is denied.
    """
    if ctx.regions:
        return list(ctx.regions)
    try:
        ec2 = ctx.client("ec2")
        resp = ec2.describe_regions(AllRegions=False)
        return sorted(r["RegionName"] for r in resp["Regions"])
    except ClientError as e:
        logger.warning("Cannot list regions, using %s: %s", ctx.default_region, e)
        return [ctx.default_region]
