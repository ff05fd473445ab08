from __future__ import annotations

import io
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, redirect, render_template, request, send_file, session, url_for

from ..container import Container
from ..core.enums import View
from ..core.exceptions import StaleSessionError
from .state import IdentityForm, PortalSession

SESSION_KEY = "portal_sid"


def register(app: Flask, container: Container) -> None:
    portal = container.portal_service

    def current_session() -> Optional[PortalSession]:
        return container.sessions.get(session.get(SESSION_KEY))

    def dashboard_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            ps = current_session()
            if ps is None or ps.view != View.DASHBOARD or ps.employee is None:
                return redirect(url_for("login"))
            return view(ps, *args, **kwargs)

        return wrapper

    def qr_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            ps = current_session()
            if ps is None or ps.employee is None:
                return jsonify({"success": False, "message": "Not logged in"}), 401
            return view(ps, *args, **kwargs)

        return wrapper

    def requested_epoch() -> Optional[int]:
        raw = request.args.get("epoch")
        if raw is None or raw == "":
            return None
        try:
            return int(raw)
        except ValueError:
            return -1

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        ps = current_session()
        if ps is not None and ps.view == View.DASHBOARD:
            return redirect(url_for("dashboard"))
        if request.method == "GET":
            return render_template("auth.html", portal=PortalSession())

        # Stored only once it reaches the dashboard
        ps = container.sessions.new_session()
        for name in IdentityForm.FIELDS:
            ps.update_form(name, request.form.get(name, ""))

        if portal.submit(ps):
            session[SESSION_KEY] = container.sessions.add(ps)
            return redirect(url_for("dashboard"))
        return render_template("auth.html", portal=ps)

    @app.route("/dashboard", endpoint="dashboard")
    @dashboard_required
    def dashboard(ps: PortalSession):
        rows = portal.history_presenter.to_ui(ps.history)
        return render_template(
            "dashboard.html",
            employee=ps.employee,
            data=rows,
            epoch=ps.epoch,
            qr_size=app.config.get("QR_SIZE"),
        )

    @app.route("/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        token = session.pop(SESSION_KEY, None)
        ps = container.sessions.get(token)
        if ps is not None:
            portal.logout(ps)
        container.sessions.discard(token)
        return redirect(url_for("login"))

    @app.route("/api/qr", endpoint="api_qr")
    @qr_required
    def api_qr(ps: PortalSession):
        try:
            artifact = portal.render_qr(ps, epoch=requested_epoch())
        except StaleSessionError as e:
            return jsonify({"success": False, "message": str(e)}), 409

        if artifact is None:
            return jsonify({"success": False, "message": "QR code unavailable"}), 503
        return jsonify({"success": True, "data_url": artifact.data_url, "size": artifact.size})

    @app.route("/qr.png", endpoint="qr_image")
    @qr_required
    def qr_image(ps: PortalSession):
        try:
            artifact = portal.render_qr(ps, epoch=requested_epoch())
        except StaleSessionError as e:
            return jsonify({"success": False, "message": str(e)}), 409

        if artifact is None:
            return jsonify({"success": False, "message": "QR code unavailable"}), 503
        return send_file(io.BytesIO(artifact.png), mimetype="image/png")
