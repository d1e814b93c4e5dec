# src/infrastructure/database/models/base.py
"""
Base Database Model

Declarative base shared by every mapped table.
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
