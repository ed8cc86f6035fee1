"""Pydantic models for AWS Network Tables."""

from .base import AWSModel, Tag
from .tgw import TransitGatewayAttachmentAssociation, TransitGatewayVpcAttachment

__all__ = [
    "AWSModel",
    "Tag",
    "TransitGatewayAttachmentAssociation",
    "TransitGatewayVpcAttachment",
]
