from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.constants import DEFAULT_SHEET_HISTORY_LIMIT
from ..core.exceptions import ValidationError
from ..container import Container
from .model import SheetKey


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: str) -> date:
        try:
            return parse_iso_date(value)
        except ValueError as exc:
            raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from exc

    def _parse_limit(value: str | None) -> int:
        if not value:
            return DEFAULT_SHEET_HISTORY_LIMIT
        try:
            limit = int(value)
        except ValueError as exc:
            raise ValidationError(f"Invalid limit {value!r}") from exc
        if limit <= 0:
            raise ValidationError("limit must be positive")
        return limit

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return jsonify({"success": False, "message": str(exc)}), 400

    @app.route("/api/sheets/<dept>/<sheet_date>", methods=["GET"], endpoint="sheet_detail")
    def sheet_detail(dept: str, sheet_date: str):
        key = SheetKey(dept=dept, sheet_date=_parse_date(sheet_date))
        metadata = container.sheets_repo.get(key)
        if metadata is None:
            return jsonify({"success": False, "message": f"No attendance sheet for {key}"}), 404
        return jsonify({"success": True, "sheet": metadata.to_dict()})

    @app.route("/api/sheets/<dept>", methods=["GET"], endpoint="sheet_list")
    def sheet_list(dept: str):
        limit = _parse_limit(request.args.get("limit"))
        sheets = container.sheets_repo.list_recent(dept, limit=limit)
        return jsonify({"success": True, "sheets": [m.to_dict() for m in sheets]})
