# Fixed-point factor of the location history (degrees * 10^7)
E7_FACTOR: float = 1e7

# Web Mercator is computed on the unit square; scale it afterwards if needed
PROJECTION_SCALE: float = 1.0
MAX_LATITUDE: float = 90.0

# Drawing settings, in output pixels
ROAD_ALPHA: float = 0.8
ROAD_STROKE_WIDTH: int = 1
LOCATION_ALPHA: float = 0.4
LOCATION_MARKER_SIZE: int = 10
