"""Views rendering report documents into HTML pages."""

from __future__ import annotations

import logging

from django.conf import settings
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import render

from core.documents import (
    DocumentError,
    document_path,
    document_title,
    list_documents,
    load_data_bank,
    load_document,
)
from reporting import render_document

logger = logging.getLogger(__name__)


def report_index(request: HttpRequest) -> HttpResponse:
    """List the report documents available in the document directory."""

    documents = list_documents(settings.REPHRASE_DOCUMENT_DIR)
    return render(request, "core/index.html", {"documents": documents})


def report_detail(request: HttpRequest, name: str) -> HttpResponse:
    """Render a single report document.

    Args:
        request: Incoming request.
        name: Document name (JSON file stem in `REPHRASE_DOCUMENT_DIR`).

    Returns:
        HTML page with every renderable element of the document.

    Raises:
        Http404: When the document does not exist or cannot be parsed.
    """

    path = document_path(settings.REPHRASE_DOCUMENT_DIR, name)
    if path is None:
        raise Http404("Unknown report.")
    try:
        document = load_document(path)
    except DocumentError as exc:
        logger.warning("Report %r unavailable: %s", name, exc)
        raise Http404("Unknown report.") from exc

    data_bank = load_data_bank(settings.REPHRASE_DATA_BANK_PATH)
    report = render_document(document, data_bank=data_bank)
    logger.debug("Rendered report %r with %d top-level elements.", name, len(report.children))
    return render(
        request,
        "core/report.html",
        {"title": document_title(document) or name, "report": report},
    )
