import logging

from flask import Flask, request

import config
from api_server_common_utils import process_molecule_rows, rows_to_csv
from api_server_molecule_routes import register_molecule_routes
from molecule_repository import MoleculeRepository

# --- Configure Logging ---
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'SAMEORIGIN',
    'Referrer-Policy': 'no-referrer',
}


def create_app(repository=None) -> Flask:
    """Build the read-only molecule API around ``repository``."""
    if repository is None:
        repository = MoleculeRepository(config.DATABASE_URL)

    app = Flask(__name__)
    app.config['MOLECULE_REPOSITORY'] = repository

    @app.before_request
    def handle_preflight():
        if request.method == 'OPTIONS':
            return '', 204
        return None

    @app.after_request
    def add_response_headers(response):
        # 允许前端跨域访问
        response.headers['Access-Control-Allow-Origin'] = config.CORS_ALLOWED_ORIGINS
        response.headers['Access-Control-Allow-Methods'] = 'GET, OPTIONS'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type, Authorization'
        for key, value in SECURITY_HEADERS.items():
            response.headers.setdefault(key, value)
        return response

    register_molecule_routes(
        app,
        logger=logger,
        fetch_molecule_rows=repository.fetch_rows,
        process_molecule_rows=process_molecule_rows,
        rows_to_csv=rows_to_csv,
        export_filename=config.EXPORT_FILENAME,
    )
    return app


app = create_app()


if __name__ == '__main__':
    # For production, use a WSGI server like Gunicorn/uWSGI instead of app.run().
    config.print_config_debug_info()
    if app.config['MOLECULE_REPOSITORY'].check_connection():
        logger.info("Successfully connected to the molecule database")
    else:
        logger.warning("Database is not reachable yet; /api/molecules will return 500 until it is")
    logger.info("Starting Flask API server on http://localhost:%s", config.SERVER_PORT)
    logger.info("API Endpoint: http://localhost:%s/api/molecules", config.SERVER_PORT)
    app.run(host=config.SERVER_HOST, port=config.SERVER_PORT)
