"""
GeoJSON helpers for destination rows
"""
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional
import json
import logging

logger = logging.getLogger(__name__)


def decode_geometry(raw: Any, expected_type: str) -> Optional[Dict[str, Any]]:
    """
    Decode a serialized geometry (ST_AsGeoJSON text) into a GeoJSON dict.

    Returns None when the value is missing, not valid JSON, or not of the
    expected geometry type.
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, (str, bytes)):
        try:
            geometry = json.loads(raw)
        except ValueError:
            logger.debug(f"Undecodable {expected_type} geometry: {raw!r}")
            return None
    else:
        geometry = raw
    if not isinstance(geometry, dict) or geometry.get("type") != expected_type:
        return None
    if not isinstance(geometry.get("coordinates"), list):
        return None
    return {"type": expected_type, "coordinates": geometry["coordinates"]}


def point_from_coords(lng: Optional[float], lat: Optional[float]) -> Optional[Dict[str, Any]]:
    """GeoJSON Point in [lng, lat] order"""
    if lng is None or lat is None:
        return None
    return {"type": "Point", "coordinates": [float(lng), float(lat)]}


def _number(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    return value


def destination_from_row(row: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build the API shape of a destination from a view or base-table row.

    Geometry is best-effort: `center` falls back to the raw coordinates and
    `area` falls back to None.
    """
    center_lat = _number(row.get("center_lat"))
    center_lng = _number(row.get("center_lng"))

    area = decode_geometry(row.get("area_geojson", row.get("area")), "Polygon")
    center = decode_geometry(row.get("center_geojson", row.get("center")), "Point")
    if center is None:
        center = point_from_coords(center_lng, center_lat)

    return {
        "id": str(row["id"]),
        "name": row.get("name"),
        "slug": row.get("slug"),
        "area": area,
        "center": center,
        "center_lat": center_lat,
        "center_lng": center_lng,
        "metadata": row.get("metadata") or {},
        "base_price": _number(row.get("base_price")),
        "altitude_m": _number(row.get("altitude_m")),
        "created_by": str(row["created_by"]) if row.get("created_by") else None,
        "created_at": row.get("created_at"),
        "updated_at": row.get("updated_at"),
    }
