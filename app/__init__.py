from flask import Flask
import logging


def create_app(config_object, extractor=None, summary_store=None, article_store=None):
    """Create and configure the Flask application"""
    app = Flask(__name__)

    # Configure logging first
    log_level = getattr(logging, getattr(config_object, 'LOG_LEVEL', 'INFO'), logging.INFO)
    logging.basicConfig(level=log_level)
    app.logger.setLevel(log_level)

    # Load configuration
    try:
        app.config.from_object(config_object)
    except Exception as e:
        app.logger.error(f"Failed to load configuration: {e}")
        raise

    # Register blueprints and initialize routes
    try:
        from .routes.main import main_bp, init_route_dependencies
        app.register_blueprint(main_bp)

        with app.app_context():
            init_route_dependencies(
                app,
                config_object,
                extractor=extractor,
                summary_store=summary_store,
                article_store=article_store,
            )

    except Exception as e:
        app.logger.error(f"Failed to initialize application routes: {e}")
        raise

    @app.route('/')
    def index():
        return "Blog scraper backend is running!"

    return app


__all__ = ['create_app']
