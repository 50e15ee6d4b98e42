from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

from flask import Response, jsonify


def register_molecule_routes(
    app,
    *,
    logger,
    fetch_molecule_rows: Callable[[], List[Dict[str, Any]]],
    process_molecule_rows: Callable[[List[Dict[str, Any]]], List[Dict[str, Any]]],
    rows_to_csv: Callable[[List[Dict[str, Any]]], str],
    export_filename: str,
) -> None:
    @app.route('/api/health', methods=['GET'])
    def health_check():
        return jsonify({'status': 'ok', 'timestamp': datetime.now(timezone.utc).isoformat()})

    @app.route('/api/molecules', methods=['GET'])
    def list_molecules():
        try:
            rows = process_molecule_rows(fetch_molecule_rows())
        except Exception as exc:
            logger.exception('Error fetching molecules: %s', exc)
            return jsonify({
                'success': False,
                'error': 'Internal server error',
                'details': str(exc),
            }), 500

        logger.info('Serving %d molecules.', len(rows))
        return jsonify({
            'success': True,
            'count': len(rows),
            'data': rows,
        })

    @app.route('/api/export', methods=['GET'])
    def export_molecules():
        try:
            rows = process_molecule_rows(fetch_molecule_rows())
            csv_text = rows_to_csv(rows)
        except Exception as exc:
            logger.exception('Error exporting molecules: %s', exc)
            return jsonify({
                'success': False,
                'error': 'Internal server error',
                'details': str(exc),
            }), 500

        logger.info('Exporting %d molecules as CSV.', len(rows))
        return Response(
            csv_text,
            mimetype='text/csv',
            headers={'Content-Disposition': f'attachment; filename={export_filename}'},
        )
