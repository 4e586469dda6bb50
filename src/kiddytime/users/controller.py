from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.web import domain_error_response, json_body, json_error
from ..container import Container
from ..core.exceptions import DomainError

log = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/has-password", methods=["GET"], endpoint="auth_has_password")
    def has_password():
        try:
            return jsonify({"hasPassword": container.auth_service.has_password()})
        except DomainError as e:
            return domain_error_response(e)

    @app.route("/api/auth/check", methods=["GET"], endpoint="auth_check")
    def check():
        user_id = session.get("user_id")
        return jsonify({"isAuthenticated": bool(user_id), "userId": user_id or None})

    @app.route("/api/auth/setup", methods=["POST"], endpoint="auth_setup")
    def setup():
        try:
            s_user = container.auth_service.setup(json_body().get("password"))
            session.permanent = True
            session["user_id"] = s_user.user_id
            return jsonify({"success": True, "message": "Mot de passe créé avec succès"})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Setup error")
            return json_error("Erreur lors de la création du mot de passe", 500)

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        try:
            s_user = container.auth_service.authenticate(json_body().get("password"))
            session.permanent = True
            session["user_id"] = s_user.user_id
            return jsonify({"success": True, "message": "Connexion réussie"})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            log.exception("Login error")
            return json_error("Erreur lors de la connexion", 500)

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def logout():
        session.clear()
        return jsonify({"success": True, "message": "Déconnexion réussie"})
