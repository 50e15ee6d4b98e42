from __future__ import annotations

import logging
from typing import Any, Dict, List

import psycopg
from psycopg.rows import dict_row

import config

logger = logging.getLogger(__name__)

# 列名重命名为前端期望的字段名
MOLECULES_QUERY = f"""
    SELECT
        id::text,
        "Name" AS name,
        "Smiles" AS smiles,
        formula,
        "Prediction" AS prediction,
        "Confidence" AS confidence,
        mw AS weight,
        logp AS "logP",
        hbd,
        hba,
        tpsa,
        rotatable_bonds,
        heavy_atoms
    FROM {config.MOLECULES_TABLE}
    ORDER BY id DESC
"""


class MoleculeRepository:
    """Read-only access to the molecules_and_predictions table."""

    def __init__(
        self,
        dsn: str,
        *,
        sslmode: str = config.DATABASE_SSLMODE,
        connect_timeout: int = config.DATABASE_CONNECT_TIMEOUT,
    ) -> None:
        self.dsn = dsn
        self.sslmode = sslmode
        self.connect_timeout = int(connect_timeout)

    def _connect(self):
        if not self.dsn:
            raise RuntimeError("DATABASE_URL is not configured.")
        return psycopg.connect(
            self.dsn,
            sslmode=self.sslmode,
            connect_timeout=self.connect_timeout,
            row_factory=dict_row,
        )

    def fetch_rows(self) -> List[Dict[str, Any]]:
        with self._connect() as conn:
            with conn.cursor() as cursor:
                cursor.execute(MOLECULES_QUERY)
                return list(cursor.fetchall())

    def check_connection(self) -> bool:
        try:
            with self._connect() as conn:
                with conn.cursor() as cursor:
                    cursor.execute("SELECT 1")
            return True
        except Exception as exc:
            logger.error("Error acquiring database connection: %s", exc)
            return False
