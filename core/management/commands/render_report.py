"""Render a report document to a standalone HTML page."""

from __future__ import annotations

from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.template.loader import render_to_string

from core.documents import DocumentError, document_title, load_data_bank, load_document
from reporting import render_document


class Command(BaseCommand):
    """Render a report document JSON file into HTML."""

    help = "Render a report document to HTML using the configured (or given) data bank."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("document", type=Path, help="Path to the report document JSON file.")
        parser.add_argument(
            "--data-bank",
            type=Path,
            default=None,
            help="Data bank JSON file (defaults to REPHRASE_DATA_BANK_PATH).",
        )
        parser.add_argument(
            "--output",
            type=Path,
            default=None,
            help="Write HTML to this file instead of stdout.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        document_path: Path = options["document"]
        data_bank_path: Path = options["data_bank"] or settings.REPHRASE_DATA_BANK_PATH
        output: Path | None = options["output"]

        try:
            document = load_document(document_path)
            data_bank = load_data_bank(data_bank_path)
        except DocumentError as exc:
            raise CommandError(str(exc)) from exc

        report = render_document(document, data_bank=data_bank)
        html = render_to_string(
            "core/report.html",
            {"title": document_title(document) or document_path.stem, "report": report},
        )

        if output is None:
            self.stdout.write(html)
            return None

        output.write_text(html, encoding="utf-8")
        self.stdout.write(
            self.style.SUCCESS(f"Rendered {len(report.children)} element(s) from {document_path} to {output}.")
        )
        return None
