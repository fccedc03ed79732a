# =======================================================================================
# fwe_access/models/tables.py - Table Definitions
# =======================================================================================
from sqlalchemy import (
    Column, DateTime, ForeignKey, Integer, MetaData, SmallInteger, String, Table,
)

metadata = MetaData()

category_group = Table(
    "category_group", metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(100), nullable=False),
)

category = Table(
    "category", metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(100), nullable=False),
    Column("multiplo", SmallInteger, nullable=False, default=0),
    Column("type", String(50)),
)

category_group_items = Table(
    "category_group_items", metadata,
    Column("id", Integer, primary_key=True),
    Column("category_group_id", Integer, ForeignKey("category_group.id"), nullable=False),
    Column("category_id", Integer, ForeignKey("category.id"), nullable=False),
)

terminal = Table(
    "terminal", metadata,
    Column("id", Integer, primary_key=True),
    Column("pin", String(20), nullable=False, index=True),
    Column("ip", String(45)),
    Column("model", String(20)),  # CATRACA | APP | OUTROS
    Column("name", String(100)),
    Column("plataform", String(50)),
    Column("category_group_id", Integer, ForeignKey("category_group.id"), nullable=False),
    Column("active", SmallInteger, nullable=False, default=1),
    Column("deleted_at", DateTime),
)

event = Table(
    "event", metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(150), nullable=False),
    Column("startdate", DateTime, nullable=False),
    Column("enddate", DateTime, nullable=False),
    Column("active", SmallInteger, nullable=False, default=1),
    Column("local", String(150)),
    Column("deleted_at", DateTime),
)

ticket = Table(
    "ticket", metadata,
    Column("id", Integer, primary_key=True),
    Column("event_id", Integer, ForeignKey("event.id"), nullable=False),
    Column("category_id", Integer, ForeignKey("category.id"), nullable=False),
    Column("ticket_source_event_id", Integer),
    Column("code", String(64), nullable=False, index=True),
    Column("fullname", String(150)),
    Column("email", String(150)),
    Column("documentId", String(50)),
    Column("active", SmallInteger, nullable=False, default=1),
    Column("master", SmallInteger, nullable=False, default=0),
    Column("accredited_at", DateTime),
    Column("deleted_at", DateTime),
)

access_action = Table(
    "access_action", metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String(50), nullable=False),
    Column("description", String(150)),
)

ticket_access = Table(
    "ticket_access", metadata,
    Column("id", Integer, primary_key=True),
    Column("ticket_id", Integer, ForeignKey("ticket.id"), nullable=False, index=True),
    Column("event_id", Integer, ForeignKey("event.id"), nullable=False),
    Column("terminal_id", Integer, ForeignKey("terminal.id"), nullable=False),
    Column("code", String(64), nullable=False),
    Column("access_date", DateTime, nullable=False),
    Column("access_action_id", Integer, ForeignKey("access_action.id"), nullable=False),
    Column("spin", SmallInteger),
)
