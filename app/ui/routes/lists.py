"""
Lists routes for UI.

Full page for the index, HTML fragments for everything else so htmx can
swap single cards in place.
"""

from fastapi import APIRouter, Depends, Form, Path, Request
from fastapi.responses import HTMLResponse, Response

from app.core.dependencies import get_list_service
from app.services.list_service import ListService
from app.ui.templating import render_result

router = APIRouter()

# ids are positive BIGINTs; anything else cannot name a row
MAX_LIST_ID = 2**63 - 1


@router.get("/lists", response_class=HTMLResponse)
async def lists_index(
    request: Request,
    service: ListService = Depends(get_list_service),
):
    """Lists index with create form"""
    result = await service.index()
    return render_result(request, result)


@router.post("/lists", response_class=HTMLResponse)
async def create_list(
    request: Request,
    name: str = Form(""),
    service: ListService = Depends(get_list_service),
):
    """Create a list and return its card (or the form with an error)"""
    result = await service.create(name)
    return render_result(request, result)


@router.get("/lists/{list_id}", response_class=HTMLResponse)
async def show_list(
    request: Request,
    list_id: int = Path(..., ge=1, le=MAX_LIST_ID),
    service: ListService = Depends(get_list_service),
):
    """Card in read mode, used to cancel an edit"""
    result = await service.show(list_id)
    return render_result(request, result)


@router.get("/lists/{list_id}/edit", response_class=HTMLResponse)
async def edit_list(
    request: Request,
    list_id: int = Path(..., ge=1, le=MAX_LIST_ID),
    service: ListService = Depends(get_list_service),
):
    """Card with the name field editable"""
    result = await service.edit(list_id)
    return render_result(request, result)


@router.patch("/lists/{list_id}", response_class=HTMLResponse)
async def update_list(
    request: Request,
    list_id: int = Path(..., ge=1, le=MAX_LIST_ID),
    name: str = Form(""),
    service: ListService = Depends(get_list_service),
):
    """Rename a list and return its card"""
    result = await service.update(list_id, name)
    return render_result(request, result)


@router.delete("/lists/{list_id}", status_code=204, response_class=Response)
async def delete_list(
    request: Request,
    list_id: int = Path(..., ge=1, le=MAX_LIST_ID),
    service: ListService = Depends(get_list_service),
):
    """Delete a list; 204 whether or not it existed"""
    result = await service.delete(list_id)
    return render_result(request, result)
