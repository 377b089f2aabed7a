"""
Service layer for customer ("pelanggan") records.

Customers are listed page by page with optional search and sorting,
created and deleted.  Each method takes the service context and holds
its lock for the whole store interaction, so requests are fully
serialized.  ``sqlite3.Error`` is not caught here; the API layer turns
it into a 500 response.
"""

from __future__ import annotations

import logging
import sqlite3

from crud_services.app.core.context import PelangganContext
from crud_services.app.schemas.pelanggan import DataTableResponse, PelangganRead
from crud_services.app.services.query_builder import ListParams, build_list_query

logger = logging.getLogger(__name__)


class PelangganService:
    """Operations on the ``pelanggan`` table."""

    @classmethod
    def list_pelanggan(cls, ctx: PelangganContext, params: ListParams) -> DataTableResponse:
        """Return one page of customers together with the total and filtered counts.

        ``total`` ignores the search filters, ``filtered`` applies them
        but ignores paging.  An empty page is returned as ``data=[]``.
        """
        query = build_list_query(params)
        with ctx.lock:
            cursor = ctx.conn.cursor()
            (total,) = cursor.execute(query.total_sql).fetchone()
            (filtered,) = cursor.execute(query.count_sql, query.where_params).fetchone()
            rows = cursor.execute(query.page_sql, query.page_params).fetchall()
        return DataTableResponse(
            data=[cls._row_to_pelanggan(row) for row in rows],
            total=total,
            filtered=filtered,
            page=params.page,
            limit=params.limit,
        )

    @classmethod
    def create_pelanggan(cls, ctx: PelangganContext, nama: str, alamat: str) -> PelangganRead:
        """Insert a customer and return it with its store-assigned id."""
        with ctx.lock:
            with ctx.conn:
                cursor = ctx.conn.execute(
                    "INSERT INTO pelanggan (nama, alamat) VALUES (?, ?)",
                    (nama, alamat),
                )
            pelanggan_id = cursor.lastrowid
        logger.info("Created pelanggan %s", pelanggan_id)
        return PelangganRead(id=pelanggan_id, nama=nama, alamat=alamat)

    @classmethod
    def delete_pelanggan(cls, ctx: PelangganContext, pelanggan_id: int) -> bool:
        """Delete a customer by id.

        Returns ``True`` if a row was removed.  Deleting an unknown id
        is not an error.
        """
        with ctx.lock:
            with ctx.conn:
                cursor = ctx.conn.execute("DELETE FROM pelanggan WHERE id = ?", (pelanggan_id,))
            affected = cursor.rowcount
        if affected:
            logger.info("Deleted pelanggan %s", pelanggan_id)
        return affected > 0

    @staticmethod
    def _row_to_pelanggan(row: sqlite3.Row) -> PelangganRead:
        return PelangganRead(id=row["id"], nama=row["nama"], alamat=row["alamat"])
