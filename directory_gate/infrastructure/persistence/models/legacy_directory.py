"""Legacy shared directory table.

``MintDb`` predates this service and is owned elsewhere. It is declared as a
Core table on ``legacy_metadata`` (no primary key is assumed) and only the
five columns the directory view exposes are mapped. Column names are the
legacy ones, including the double space in ``RELATIONSHIP  MANAGER``.
"""

from sqlalchemy import Column, String, Table

from directory_gate.infrastructure.persistence.base import legacy_metadata

mint_db = Table(
    "MintDb",
    legacy_metadata,
    Column("NAME", String),
    Column("MOBILE", String),
    Column("PAN", String),
    Column("RELATIONSHIP  MANAGER", String),
    Column("FAMILY HEAD", String),
)
