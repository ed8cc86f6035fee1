"""Transit Gateway Pydantic models."""

from datetime import datetime
from typing import Optional
from pydantic import Field
from .base import AWSModel, Tag


class TransitGatewayAttachmentAssociation(AWSModel):
    """Route table association of an attachment."""

    state: Optional[str] = Field(
        None, description="associating, associated, disassociating, disassociated"
    )
    transit_gateway_route_table_id: Optional[str] = None


class TransitGatewayVpcAttachment(AWSModel):
    """One entry of DescribeTransitGatewayAttachments."""

    transit_gateway_attachment_id: str
    transit_gateway_id: Optional[str] = None
    transit_gateway_owner_id: Optional[str] = None
    resource_owner_id: Optional[str] = None
    resource_type: Optional[str] = Field(
        None, description="vpc, vpn, direct-connect-gateway, connect, peering, ..."
    )
    resource_id: Optional[str] = None
    state: Optional[str] = None
    association: Optional[TransitGatewayAttachmentAssociation] = None
    creation_time: Optional[datetime] = None
    tags: Optional[list[Tag]] = None
