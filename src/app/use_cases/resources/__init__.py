"""Generic resource use cases"""
from .list_resources import ListResources
from .get_resource import GetResource
from .create_resource import CreateResource
from .update_resource import UpdateResource
from .delete_resource import DeleteResource
from .resource_stats import ResourceStats, build_stats_query

__all__ = [
    "ListResources",
    "GetResource",
    "CreateResource",
    "UpdateResource",
    "DeleteResource",
    "ResourceStats",
    "build_stats_query",
]
