import logging
from typing import Optional
from flask import Flask

from careerhub import Store

from .config import ServerConfig

logger = logging.getLogger(__name__)


def create_app(config: Optional[ServerConfig] = None, store: Optional[Store] = None) -> Flask:
	"""Create and configure the Flask application."""
	if config is None:
		config = ServerConfig()
	
	if store is None:
		store = Store.load(config.data_file)
	
	app = Flask(__name__)
	
	# Configure app
	app.config["CAREERHUB_CONFIG"] = config
	app.config["CAREERHUB_STORE"] = store
	app.json.sort_keys = False
	
	# Register blueprints
	from .routes.views import views_bp
	from .routes.api import api_bp
	
	app.register_blueprint(views_bp)
	app.register_blueprint(api_bp, url_prefix="/api")
	
	logger.info(f"Server initialized (data file: {store.path})")
	
	return app


def run_server(config: Optional[ServerConfig] = None):
	"""Run the web server."""
	if config is None:
		config = ServerConfig()
	
	app = create_app(config)
	
	logger.info(f"App running at {config.url}")
	
	app.run(
		host=config.host,
		port=config.port,
		debug=config.debug,
		threaded=True
	)
