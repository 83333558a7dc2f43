class TrailMapError(Exception):
    """Base error for the trail map pipeline"""


class ResourceOpenError(TrailMapError):
    """A dataset path is missing or cannot be opened"""

    def __init__(self, path: str, reason: str = "cannot be opened"):
        super().__init__(f"{path}: {reason}")
        self.path = path


class DecodeError(TrailMapError):
    """A dataset header or record could not be decoded"""

    def __init__(self, path: str, reason: str, record: int | None = None):
        where = f"{path} (record {record})" if record is not None else path
        super().__init__(f"Failed to decode {where}: {reason}")
        self.path = path
        self.record = record


class ConfigurationError(TrailMapError):
    """The inputs cannot produce a sensible map"""


class DegenerateExtentError(ConfigurationError):
    """The bounding box has zero extent on at least one axis"""


class EmptyDatasetError(ConfigurationError):
    """The road dataset has no usable coordinates"""


class InvalidGeometryPoint(TrailMapError, ValueError):
    """A coordinate lies outside the domain of the projection.

    This is the only recoverable error: the geometry or point carrying the
    coordinate is skipped.
    """
