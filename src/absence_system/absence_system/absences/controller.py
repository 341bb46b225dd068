from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.constants import APP_TITLE
from ..core.enums import ALL_SUBJECTS
from ..core.exceptions import PersistenceError, ValidationError
from ..container import Container
from .model import AbsenceFilters

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/subjects", methods=["GET"], endpoint="api_subjects")
    def api_subjects():
        return jsonify({"title": APP_TITLE, "subjects": [s.value for s in ALL_SUBJECTS]})

    @app.route("/api/absences", methods=["GET"], endpoint="api_absences_list")
    def api_absences_list():
        try:
            filters = AbsenceFilters.from_mapping(request.args)
            records = container.absence_service.search(filters)
            return jsonify({"success": True, "count": len(records), "records": [r.to_dict() for r in records]})
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            return jsonify({"success": False, "message": "Error al cargar los registros."}), 503
        except Exception:
            logger.exception("Unexpected error listing absences")
            return jsonify({"success": False, "message": "Error del sistema al cargar los registros"}), 500

    @app.route("/api/absences", methods=["POST"], endpoint="api_absences_create")
    def api_absences_create():
        try:
            data = request.get_json(silent=True) or {}
            draft = container.absence_service.build_draft(data)
            record = container.absence_service.register(draft)
            return jsonify(
                {
                    "success": True,
                    "message": "Registro guardado exitosamente.",
                    "record": record.to_dict(),
                }
            ), 201
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            return jsonify({"success": False, "message": "Error al guardar el registro."}), 503
        except Exception:
            logger.exception("Unexpected error saving absence")
            return jsonify({"success": False, "message": "Error del sistema al guardar el registro"}), 500

    @app.route("/api/absences/<int:record_id>", methods=["DELETE"], endpoint="api_absences_delete")
    def api_absences_delete(record_id: int):
        try:
            container.absence_service.delete(record_id)
            return jsonify({"success": True, "message": "Registro eliminado exitosamente."})
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except PersistenceError:
            return jsonify({"success": False, "message": "Error al eliminar el registro."}), 503
        except Exception:
            logger.exception("Unexpected error deleting absence %s", record_id)
            return jsonify({"success": False, "message": "Error del sistema al eliminar el registro"}), 500
