"""aws_ec2_transit_gateway_vpc_attachment"""

from typing import Optional

from ..aws import (
    aws_regional_columns,
    build_region_list,
    ec2_tags_to_map,
    is_not_found_error,
    resource_interface_description,
)
from ..core import get_logger
from ..models import TransitGatewayVpcAttachment
from ..plugin import (
    Column,
    ColumnType,
    FromField,
    FromHydrate,
    FromTransform,
    GetConfig,
    ListConfig,
    QueryContext,
    Row,
    Table,
)

logger = get_logger("tgw_attachment")

TABLE_NAME = "aws_ec2_transit_gateway_vpc_attachment"
KEY_COLUMN = "transit_gateway_attachment_id"

NOT_FOUND_CODES = [
    "InvalidTransitGatewayAttachmentID.NotFound",
    "InvalidTransitGatewayAttachmentID.Unavailable",
    "InvalidTransitGatewayAttachmentID.Malformed",
]

AttachmentRow = Row[TransitGatewayVpcAttachment]


def table_aws_ec2_transit_gateway_vpc_attachment() -> Table:
    return Table(
        name=TABLE_NAME,
        description="AWS EC2 Transit Gateway VPC Attachment",
        list_config=ListConfig(hydrate=list_transit_gateway_vpc_attachments),
        get_config=GetConfig(
            key_column=KEY_COLUMN,
            hydrate=get_transit_gateway_vpc_attachment,
            ignore_error=is_not_found_error(NOT_FOUND_CODES),
        ),
        get_matrix=build_region_list,
        columns=aws_regional_columns(
            [
                Column(
                    "transit_gateway_attachment_id",
                    ColumnType.STRING,
                    "The ID of the transit gateway attachment.",
                ),
                Column(
                    "transit_gateway_id",
                    ColumnType.STRING,
                    "The ID of the transit gateway.",
                ),
                Column(
                    "transit_gateway_owner_id",
                    ColumnType.STRING,
                    "The ID of the AWS account that owns the transit gateway.",
                ),
                Column(
                    "state",
                    ColumnType.STRING,
                    "The attachment state of the transit gateway attachment.",
                ),
                Column(
                    "creation_time",
                    ColumnType.TIMESTAMP,
                    "The creation time of the transit gateway attachment.",
                ),
                Column("resource_id", ColumnType.STRING, "The ID of the resource."),
                Column(
                    "resource_type",
                    ColumnType.STRING,
                    "The resource type of the transit gateway attachment.",
                ),
                Column(
                    "resource_owner_id",
                    ColumnType.STRING,
                    "The ID of the AWS account that owns the resource.",
                ),
                Column(
                    "association_state",
                    ColumnType.STRING,
                    "The state of the association.",
                    FromField("association.state"),
                ),
                Column(
                    "association_transit_gateway_route_table_id",
                    ColumnType.STRING,
                    "The ID of the route table for the transit gateway.",
                    FromField("association.transit_gateway_route_table_id"),
                ),
                Column(
                    "tags_src",
                    ColumnType.JSON,
                    "A list of tags assigned.",
                    FromField("tags"),
                ),
                # Standard columns
                Column(
                    "tags",
                    ColumnType.JSON,
                    resource_interface_description("tags"),
                    FromTransform(attachment_tags),
                ),
                Column(
                    "title",
                    ColumnType.STRING,
                    resource_interface_description("title"),
                    FromTransform(attachment_title),
                ),
                Column(
                    "akas",
                    ColumnType.JSON,
                    resource_interface_description("akas"),
                    FromHydrate(attachment_akas),
                ),
            ]
        ),
    )


# ============ List / Get ============


def list_transit_gateway_vpc_attachments(ctx: QueryContext, region: str) -> None:
    """Stream every attachment in region, one page at a time."""
    logger.debug("list region=%s", region)
    if ctx.cancelled:
        return
    ec2 = ctx.client("ec2", region_name=region)
    paginator = ec2.get_paginator("describe_transit_gateway_attachments")

    for page in paginator.paginate():
        for raw in page.get("TransitGatewayAttachments", []):
            ctx.stream_list_item(TransitGatewayVpcAttachment.model_validate(raw), region)
        # Checked between pages so no further page is requested
        if ctx.cancelled:
            logger.debug("list region=%s stopped early", region)
            return


def get_transit_gateway_vpc_attachment(
    ctx: QueryContext, region: str
) -> Optional[TransitGatewayVpcAttachment]:
    attachment_id = ctx.key_qual(KEY_COLUMN)
    logger.debug("get region=%s id=%s", region, attachment_id)
    ec2 = ctx.client("ec2", region_name=region)

    try:
        resp = ec2.describe_transit_gateway_attachments(
            TransitGatewayAttachmentIds=[attachment_id]
        )
    except Exception as e:
        logger.debug("get region=%s id=%s error: %s", region, attachment_id, e)
        raise

    items = resp.get("TransitGatewayAttachments") or []
    if not items:
        return None
    return TransitGatewayVpcAttachment.model_validate(items[0])


# ============ Derived columns ============


def attachment_tags(row: AttachmentRow) -> Optional[dict[str, str]]:
    return ec2_tags_to_map(row.item.tags)


def attachment_title(row: AttachmentRow) -> str:
    """First Name tag in provider order, otherwise the attachment ID."""
    for tag in row.item.tags or []:
        if tag.key == "Name":
            return tag.value
    return row.item.transit_gateway_attachment_id


def attachment_arn(
    partition: str, region: str, account_id: str, attachment_id: str
) -> str:
    return f"arn:{partition}:ec2:{region}:{account_id}:transit-gateway-attachment/{attachment_id}"


def attachment_akas(row: AttachmentRow) -> list[str]:
    common = row.ctx.common_columns()
    return [
        attachment_arn(
            common.partition,
            row.region,
            common.account_id,
            row.item.transit_gateway_attachment_id,
        )
    ]
