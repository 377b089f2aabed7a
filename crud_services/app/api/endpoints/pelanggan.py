"""
Customer endpoints.

All routes use ``GET`` with query parameters, mutations included, so
that the bundled front end can drive them with plain ``fetch`` calls.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from crud_services.app.api.deps import parse_id
from crud_services.app.core.context import PelangganContext, get_context
from crud_services.app.schemas.pelanggan import DataTableResponse, PelangganRead
from crud_services.app.services.pelanggan_service import PelangganService
from crud_services.app.services.query_builder import ListParams

router = APIRouter()


@router.get("/data", response_model=DataTableResponse)
def list_pelanggan(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    sort: Optional[str] = Query(None),
    order: Optional[str] = Query(None),
    search_nama: Optional[str] = Query(None),
    search_alamat: Optional[str] = Query(None),
    ctx: PelangganContext = Depends(get_context),
) -> DataTableResponse:
    """Return one page of customers.

    - **page**, **limit**: paging, defaults 1 and 10; invalid values fall back to the defaults.
    - **sort**: `id`, `nama` or `alamat` (default `id`).
    - **order**: `desc` for descending, anything else ascending.
    - **search_nama**, **search_alamat**: substring filters combined with AND.
    """
    params = ListParams.from_query(
        page=page,
        limit=limit,
        sort=sort,
        order=order,
        search_nama=search_nama,
        search_alamat=search_alamat,
    )
    return PelangganService.list_pelanggan(ctx, params)


@router.get("/add", response_model=PelangganRead)
def add_pelanggan(
    nama: str = Query(""),
    alamat: str = Query(""),
    ctx: PelangganContext = Depends(get_context),
) -> PelangganRead:
    """Create a customer.  Both ``nama`` and ``alamat`` must be non-empty."""
    if nama == "" or alamat == "":
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="nama dan alamat wajib diisi")
    return PelangganService.create_pelanggan(ctx, nama, alamat)


@router.get("/delete", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_pelanggan(
    raw_id: Optional[str] = Query(None, alias="id"),
    ctx: PelangganContext = Depends(get_context),
) -> Response:
    """Delete a customer.  Unknown or malformed ids are ignored."""
    pelanggan_id = parse_id(raw_id)
    if pelanggan_id is not None:
        PelangganService.delete_pelanggan(ctx, pelanggan_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
