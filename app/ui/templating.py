"""
Template setup and rendering of service results.
"""

from fastapi import Request
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

from app.models.list import List
from app.schemas.list import ListResult, ListView

# The create form posts into the list container; a rejected create
# replaces the form itself instead.
HTMX_HEADERS = {
    ListView.FORM: {"HX-Retarget": "#new-list-form", "HX-Reswap": "outerHTML"},
}


def list_url(list_obj: List) -> str:
    return f"/lists/{list_obj.id}"


def edit_list_url(list_obj: List) -> str:
    return f"/lists/{list_obj.id}/edit"


def card_id(list_obj: List) -> str:
    return f"card-{list_obj.id}"


def create_templates(directory: str) -> Jinja2Templates:
    """Jinja2 environment with the URL helpers the list templates use."""
    templates = Jinja2Templates(directory=directory)
    templates.env.globals.update(
        list_url=list_url,
        edit_list_url=edit_list_url,
        card_id=card_id,
    )
    return templates


def render_result(request: Request, result: ListResult) -> Response:
    """Turn a ListResult into a page, a fragment or an empty response."""
    if result.view is ListView.NONE:
        return Response(status_code=result.status_code)

    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        result.view.value,
        {
            "list": result.list,
            "lists": result.lists,
            "new_list": result.new_list,
            "editing_name": result.editing_name,
            "error": result.error,
        },
        status_code=result.status_code,
        headers=HTMX_HEADERS.get(result.view),
    )
