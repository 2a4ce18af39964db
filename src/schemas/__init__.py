"""Schema package for record, reference and metadata contracts."""

from .document import DocumentLike, GeoDocument, Geometry, ItemViewer
from .metadata import Metadata, MetadataTransformer, TransformError
from .references import Reference, References

__all__ = [
    "DocumentLike",
    "GeoDocument",
    "Geometry",
    "ItemViewer",
    "Metadata",
    "MetadataTransformer",
    "Reference",
    "References",
    "TransformError",
]
