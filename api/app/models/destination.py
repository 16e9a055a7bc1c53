"""
Destination Model
"""
from sqlalchemy import Column, String, Text, DateTime, Numeric, Float, MetaData, Table, func
from sqlalchemy.dialects.postgresql import UUID, JSONB
import uuid

from app.models.geometry import GeoJSONGeometry
from app.utils.database import Base


class Destination(Base):
    __tablename__ = "destinations"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(120), nullable=False)
    slug = Column(String(140), unique=True, nullable=False)

    # PostGIS geometry (EPSG:4326); center is filled from lat/lng by a DB trigger when omitted
    area = Column(GeoJSONGeometry("POLYGON"))
    center = Column(GeoJSONGeometry("POINT"))
    center_lat = Column(Float, nullable=False)
    center_lng = Column(Float, nullable=False)

    extra_metadata = Column("metadata", JSONB, default=dict)  # images, videos, description (metadata is reserved)
    base_price = Column(Numeric(10, 2), nullable=False, server_default="0")
    altitude_m = Column(Numeric(7, 2))

    created_by = Column(UUID(as_uuid=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Destination {self.name} ({self.slug})>"


# Read-only view; kept out of Base.metadata so it is never created as a table
view_metadata = MetaData()

destinations_public_view = Table(
    "vw_destinations_public",
    view_metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(120)),
    Column("slug", String(140)),
    Column("metadata", JSONB),
    Column("created_by", UUID(as_uuid=True)),
    Column("created_at", DateTime(timezone=True)),
    Column("updated_at", DateTime(timezone=True)),
    Column("center_lat", Float),
    Column("center_lng", Float),
    Column("area_geojson", Text),
    Column("center_geojson", Text),
    Column("base_price", Numeric(10, 2)),
    Column("altitude_m", Numeric(7, 2)),
)
