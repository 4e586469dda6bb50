from __future__ import annotations

import logging
from datetime import date

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import domain_error_response, json_error, login_required
from ..container import Container
from ..core.exceptions import DomainError
from .service import CsvExport

log = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _csv_response(export: CsvExport):
        return app.response_class(
            export.content,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )

    @app.route("/api/export/entries.csv", methods=["GET"], endpoint="export_entries_csv")
    @login_required
    def export_entries_csv():
        start_s = request.args.get("startDate")
        end_s = request.args.get("endDate")
        if not start_s or not end_s:
            return json_error("startDate et endDate requis", 400)
        try:
            start = parse_iso_date(start_s)
            end = parse_iso_date(end_s)
        except ValueError:
            return json_error("Dates invalides (format YYYY-MM-DD attendu)", 400)

        try:
            return _csv_response(container.export_service.export_entries(start=start, end=end))
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Export entries error")
            return json_error("Erreur lors de l'export des présences", 500)

    @app.route("/api/export/children.csv", methods=["GET"], endpoint="export_children_csv")
    @login_required
    def export_children_csv():
        try:
            return _csv_response(container.export_service.export_children(today=date.today()))
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Export children error")
            return json_error("Erreur lors de l'export des enfants", 500)
