from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.web import domain_error_response, json_body, json_error, login_required
from ..container import Container
from ..core.exceptions import DomainError

log = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/entries", methods=["GET"], endpoint="entries_list")
    @login_required
    def list_entries():
        try:
            entries = container.entry_service.list_for_range(
                request.args.get("startDate"),
                request.args.get("endDate"),
            )
            return jsonify([e.to_dict() for e in entries])
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Get entries error")
            return json_error("Erreur lors de la récupération des entrées", 500)

    @app.route("/api/entries/<child_id>/<date>", methods=["GET"], endpoint="entries_get")
    @login_required
    def get_entry(child_id: str, date: str):
        try:
            return jsonify(container.entry_service.get_entry(child_id, date).to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Get entry error")
            return json_error("Erreur lors de la récupération de l'entrée", 500)

    @app.route("/api/entries", methods=["POST"], endpoint="entries_save")
    @login_required
    def save_entry():
        try:
            entry = container.entry_service.save_entry(json_body())
            return jsonify(entry.to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Save entry error")
            return json_error("Erreur lors de la sauvegarde de l'entrée", 500)

    @app.route("/api/entries/<child_id>/<date>", methods=["PUT"], endpoint="entries_update")
    @login_required
    def update_entry(child_id: str, date: str):
        try:
            entry = container.entry_service.update_entry(child_id, date, json_body())
            return jsonify(entry.to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Update entry error")
            return json_error("Erreur lors de la mise à jour de l'entrée", 500)
