"""
FixIt - SQLAlchemy models

One table per record collection: repair_requests, users, inventory,
maintenance_schedule. Records are keyed by their string id and saved whole.
"""

from sqlalchemy import Column, Integer, String, Text, Float, DateTime, JSON, Index
from fixit.db.session import Base


class User(Base):
    """Users collection, keyed by username"""
    __tablename__ = "users"

    username = Column(String(100), primary_key=True, comment="login name")
    password = Column(String(255), nullable=False, comment="stored as entered")
    name = Column(String(200), nullable=False, comment="display name")
    role = Column(String(20), nullable=False, default="user", comment="staff/user")
    position = Column(String(200), comment="job title")
    dept = Column(String(200), comment="department")

    __table_args__ = (
        Index("idx_users_role", "role"),
    )


class RepairRequest(Base):
    """Repair tickets (RE-<year>-<suffix>)"""
    __tablename__ = "repair_requests"

    id = Column(String(50), primary_key=True)
    created_at = Column(DateTime, nullable=False, index=True)
    priority = Column(String(20), nullable=False, default="Normal", comment="Normal/Urgent/Critical")
    status = Column(String(30), nullable=False, default="Pending", comment="Pending/In Progress/Vendor Contacted/Completed")

    # ===== requester / asset sub-records =====
    requester = Column(JSON, nullable=False, comment="{name, position, department, phone, username}")
    requester_username = Column(String(100), index=True, comment="copy of requester.username for filtering")
    asset = Column(JSON, nullable=False, comment="{type, other_type, id_number, room}")

    symptoms = Column(Text, nullable=False)
    preferred_date = Column(String(50), comment="'<date> <time>' as entered")

    # ===== staff handling =====
    cost = Column(Float)
    staff_action = Column(JSON, comment="""vendor contact and service visit:
    {vendor_name, contact_date, contact_time, service_date, service_time,
     notes, pickup_person, pickup_date}""")

    # ===== post-completion feedback =====
    rating = Column(Integer)
    feedback = Column(Text)

    __table_args__ = (
        Index("idx_repair_requests_status", "status"),
    )


class InventoryItem(Base):
    """Spare parts and consumables"""
    __tablename__ = "inventory"

    id = Column(String(50), primary_key=True)
    name = Column(String(200), nullable=False)
    category = Column(String(100))
    stock = Column(Integer, nullable=False, default=0)
    unit = Column(String(50))
    min_stock = Column(Integer, nullable=False, default=5)
    last_updated = Column(DateTime)


class MaintenanceTask(Base):
    """Preventive maintenance plan entries"""
    __tablename__ = "maintenance_schedule"

    id = Column(String(50), primary_key=True)
    title = Column(String(200), nullable=False)
    asset_name = Column(String(200))
    location = Column(String(200))
    next_date = Column(String(20), comment="YYYY-MM-DD")
    period = Column(String(20), default="Monthly", comment="Monthly/Quarterly/Yearly")
    status = Column(String(20), default="Upcoming", comment="Upcoming/Done/Overdue")

    __table_args__ = (
        Index("idx_maintenance_next_date", "next_date"),
    )
