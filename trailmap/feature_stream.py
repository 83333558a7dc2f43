import os
import struct
from typing import BinaryIO, Optional

import fiona
from fiona.errors import FionaError

from trailmap.errors import DecodeError, ResourceOpenError
from trailmap.logger import logger
from trailmap.project_types import Geometry

POLYLINE_GEOMETRY_TYPES = {
    "LineString",
    "3D LineString",
    "MultiLineString",
    "3D MultiLineString",
}

SHP_FILE_CODE = 9994
SHP_HEADER_SIZE = 100
SHX_RECORD_SIZE = 8
# A null shape record holds only its 4-byte shape type
NULL_SHAPE_WORDS = 2


def decode_geometry(raw) -> Geometry:
    """
    Convert one record's geometry to an ordered tuple of (lon, lat) pairs.

    Null and empty geometries decode to an empty tuple, as do multi-part lines,
    which are not drawn. A single-point line is kept as it is.
    """
    if raw is None:
        return ()

    data = getattr(raw, "__geo_interface__", raw)
    geom_type = data["type"]
    coordinates = data["coordinates"] or ()

    if geom_type == "MultiLineString":
        logger.debug(f"Skipping multi-part line with {len(coordinates)} parts")
        return ()
    if geom_type != "LineString":
        raise ValueError(f"Expected a polyline, got {geom_type}")

    return tuple((coord[0], coord[1]) for coord in coordinates)


def check_shp_length(path: str) -> None:
    """Fail when the .shp holds fewer bytes than its header declares"""
    with open(path, "rb") as f:
        header = f.read(SHP_HEADER_SIZE)
    if len(header) != SHP_HEADER_SIZE:
        raise DecodeError(path, "shapefile header is incomplete")

    file_code = struct.unpack(">i", header[0:4])[0]
    if file_code != SHP_FILE_CODE:
        raise DecodeError(path, f"not a shapefile (file code {file_code})")

    # Lengths are counted in 16-bit words
    declared = struct.unpack(">i", header[24:28])[0] * 2
    actual = os.path.getsize(path)
    if actual < declared:
        raise DecodeError(
            path, f"truncated: header declares {declared} bytes, file has {actual}"
        )


def find_index_path(path: str) -> Optional[str]:
    base, _ext = os.path.splitext(path)
    for candidate in (base + ".shx", base + ".SHX"):
        if os.path.exists(candidate):
            return candidate
    return None


class RoadFeatureStream:
    """
    Lazy iterator over the polylines of a road shapefile.

    Each instance holds its own reader; a second pass over the same file needs
    a second call to open_road_stream.
    """

    def __init__(self, path: str):
        self.path = path
        self.records_read = 0
        self._index: Optional[BinaryIO] = None

        if not os.path.exists(path):
            raise ResourceOpenError(path, "no such file")
        if not os.access(path, os.R_OK):
            raise ResourceOpenError(path, "permission denied")

        is_shapefile = path.lower().endswith(".shp")
        if is_shapefile:
            check_shp_length(path)

        try:
            self._collection = fiona.open(path)
        except FionaError as e:
            raise DecodeError(path, f"unreadable header: {e}") from e

        geometry_type = self._collection.schema.get("geometry")
        if geometry_type not in POLYLINE_GEOMETRY_TYPES:
            self._collection.close()
            raise DecodeError(path, f"expected polyline geometry, got {geometry_type}")

        index_path = find_index_path(path) if is_shapefile else None
        if index_path is not None:
            self._index = open(index_path, "rb")

        self._features = iter(self._collection)

    def __enter__(self) -> "RoadFeatureStream":
        return self

    def __exit__(self, *_exc) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._collection)

    def __iter__(self) -> "RoadFeatureStream":
        return self

    def __next__(self) -> Geometry:
        try:
            feature = next(self._features)
            raw = feature.geometry
            geometry = decode_geometry(raw)
        except (FionaError, ValueError, KeyError, TypeError) as e:
            raise DecodeError(self.path, str(e), record=self.records_read) from e

        if raw is None:
            self._check_null_record(self.records_read)

        self.records_read += 1
        return geometry

    def _check_null_record(self, record: int) -> None:
        """
        GDAL reads a record it cannot parse as a null shape. The index still
        holds the record's real length, so anything longer than a null shape
        is a damaged record.
        """
        if self._index is None:
            return

        self._index.seek(SHP_HEADER_SIZE + record * SHX_RECORD_SIZE)
        entry = self._index.read(SHX_RECORD_SIZE)
        if len(entry) != SHX_RECORD_SIZE:
            raise DecodeError(self.path, "missing from the .shx index", record=record)

        _offset, content_words = struct.unpack(">2i", entry)
        if content_words > NULL_SHAPE_WORDS:
            raise DecodeError(
                self.path,
                f"shape of {content_words * 2} bytes could not be read",
                record=record,
            )

    def close(self) -> None:
        if self._index is not None:
            self._index.close()
            self._index = None
        if not self._collection.closed:
            self._collection.close()


def open_road_stream(path: str) -> RoadFeatureStream:
    return RoadFeatureStream(path)
