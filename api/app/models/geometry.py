"""
PostGIS geometry column type exchanging GeoJSON with the database
"""
import json

from sqlalchemy import func
from sqlalchemy.types import UserDefinedType


class GeoJSONGeometry(UserDefinedType):
    """
    Geometry column bound from / read as GeoJSON.

    Writes go through ST_GeomFromGeoJSON with the column SRID, reads through
    ST_AsGeoJSON, so Python code only ever sees GeoJSON dictionaries.
    """
    cache_ok = True

    def __init__(self, geometry_type: str = "GEOMETRY", srid: int = 4326):
        self.geometry_type = geometry_type
        self.srid = srid

    def get_col_spec(self, **kw):
        return f"GEOMETRY({self.geometry_type}, {self.srid})"

    def bind_expression(self, bindvalue):
        return func.ST_SetSRID(func.ST_GeomFromGeoJSON(bindvalue), self.srid)

    def column_expression(self, col):
        return func.ST_AsGeoJSON(col)

    def bind_processor(self, dialect):
        def process(value):
            if value is None or isinstance(value, str):
                return value
            return json.dumps(value)
        return process

    def result_processor(self, dialect, coltype):
        def process(value):
            if value is None or isinstance(value, dict):
                return value
            return json.loads(value)
        return process
