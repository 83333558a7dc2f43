from trailmap.project_types import MapConfig

CONFIG: MapConfig = MapConfig(
    roads_path="data/shapefiles/gis_osm_roads_free_1.shp",
    locations_path="data/location-history.json",
    output_path="graph.png",
    width_px=4000,
    background_color="#141518",
    road_color="#D3D3D3",
    location_color="#ce8c16",
)
