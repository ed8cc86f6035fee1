"""AWS specific helpers for tables"""

from .common import (
    aws_regional_columns,
    build_region_list,
    ec2_tags_to_map,
    error_code,
    is_not_found_error,
    resource_interface_description,
)

__all__ = [
    "aws_regional_columns",
    "build_region_list",
    "ec2_tags_to_map",
    "error_code",
    "is_not_found_error",
    "resource_interface_description",
]
