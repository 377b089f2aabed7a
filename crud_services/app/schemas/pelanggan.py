"""
Pydantic schemas for customer ("pelanggan") records.

A customer has only a name and an address besides its store-assigned
identifier.  ``DataTableResponse`` is the envelope returned by the
listing endpoint: one page of rows together with the unfiltered and
filtered row counts, so that clients can render "N of M records"
without a second request.
"""

from typing import List

from pydantic import BaseModel, Field


class PelangganRead(BaseModel):
    """A customer row as returned by the API."""

    id: int
    nama: str = Field(..., examples=["Budi Santoso"])
    alamat: str = Field(..., examples=["Jl. Merdeka No. 12, Bandung"])


class DataTableResponse(BaseModel):
    """One page of customers plus the counts needed for paging."""

    data: List[PelangganRead]
    total: int = Field(..., description="Number of rows in the table, ignoring filters")
    filtered: int = Field(..., description="Number of rows matching the search filters")
    page: int
    limit: int
