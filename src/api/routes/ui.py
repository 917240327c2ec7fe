"""
Browser UI route - renders the two table editors
"""

from pathlib import Path
from fastapi import APIRouter, Request
from fastapi.templating import Jinja2Templates

WEB_DIR = Path(__file__).resolve().parents[2] / "web"
TEMPLATES_DIR = WEB_DIR / "templates"
STATIC_DIR = WEB_DIR / "static"

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Column configuration for each editor; rendered into the page as JSON
EDITORS = [
    {
        "title": "Customers",
        "endpoint": "/api/customers",
        "editable": True,
        "columns": [
            {"key": "name", "label": "Name"},
            {"key": "email", "label": "Email", "type": "email"},
        ],
    },
    {
        "title": "Orders",
        "endpoint": "/api/orders",
        # No PUT/DELETE endpoints exist for orders
        "editable": False,
        "columns": [
            {"key": "customer_name", "label": "Customer Name"},
            {"key": "total", "label": "Total", "type": "number"},
        ],
    },
]

@router.get("/")
def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"editors": EDITORS})
