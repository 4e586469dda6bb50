from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.web import domain_error_response, json_body, json_error, login_required
from ..container import Container
from ..core.exceptions import DomainError

log = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/children", methods=["GET"], endpoint="children_list")
    @login_required
    def list_children():
        try:
            children = container.child_service.list_children()
            return jsonify([c.to_dict() for c in children])
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Get children error")
            return json_error("Erreur lors de la récupération des enfants", 500)

    @app.route("/api/children/<child_id>", methods=["GET"], endpoint="children_get")
    @login_required
    def get_child(child_id: str):
        try:
            return jsonify(container.child_service.get_child(child_id).to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Get child error")
            return json_error("Erreur lors de la récupération de l'enfant", 500)

    @app.route("/api/children", methods=["POST"], endpoint="children_create")
    @login_required
    def create_child():
        try:
            child = container.child_service.create_child(json_body())
            return jsonify(child.to_dict()), 201
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Create child error")
            return json_error("Erreur lors de la création de l'enfant", 500)

    @app.route("/api/children/<child_id>", methods=["PUT"], endpoint="children_update")
    @login_required
    def update_child(child_id: str):
        try:
            child = container.child_service.update_child(child_id, json_body())
            return jsonify(child.to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Update child error")
            return json_error("Erreur lors de la mise à jour de l'enfant", 500)

    @app.route("/api/children/<child_id>", methods=["DELETE"], endpoint="children_delete")
    @login_required
    def delete_child(child_id: str):
        try:
            container.child_service.delete_child(child_id)
            return jsonify({"success": True, "message": "Enfant supprimé"})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Delete child error")
            return json_error("Erreur lors de la suppression de l'enfant", 500)
