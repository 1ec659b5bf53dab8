from datetime import datetime, timezone
from flask import Blueprint, request, jsonify, current_app

from app.database import MongoArticleStore, SupabaseSummaryStore
from app.errors import ScraperError
from app.services.extractor import NewspaperExtractor
from app.services.persistence_service import PersistenceService
from app.services.scrape_service import ScrapeService

# Initialize the blueprint
main_bp = Blueprint('main', __name__)


def init_route_dependencies(app, config_object, extractor=None, summary_store=None, article_store=None):
    """Build the scrape pipeline once per app; collaborators can be swapped in."""
    missing = config_object.missing_settings()
    if missing:
        # Not fatal at startup: every scrape request reports it instead
        app.logger.error(f"Missing required configuration: {', '.join(missing)}")

    extractor = extractor or NewspaperExtractor(request_timeout=config_object.EXTRACTION_TIMEOUT_SECONDS)
    summary_store = summary_store or SupabaseSummaryStore(
        config_object.SUPABASE_URL,
        config_object.SUPABASE_ANON_KEY,
        table=config_object.SUPABASE_TABLE,
    )
    article_store = article_store or MongoArticleStore(
        config_object.MONGODB_URI,
        database=config_object.MONGODB_DATABASE,
        collection=config_object.MONGODB_COLLECTION,
        timeout_ms=config_object.MONGODB_TIMEOUT_MS,
    )

    persistence = PersistenceService(summary_store, article_store)
    app.extensions['scrape_service'] = ScrapeService(config_object, extractor, persistence)
    app.extensions['article_store'] = article_store


@main_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    scrape_service = current_app.extensions['scrape_service']
    missing = scrape_service.config.missing_settings()

    try:
        if 'MONGODB_URI' in missing:
            raise RuntimeError("MONGODB_URI not configured")
        current_app.extensions['article_store'].ping()
        mongo_status = "connected"
    except Exception as e:
        mongo_status = f"disconnected: {e}"

    return jsonify({
        "status": "ok" if not missing else "degraded",
        "message": "Blog scraper is healthy!" if not missing else "Blog scraper is missing configuration",
        "dependencies": {
            "mongodb": mongo_status,
            "supabase_url": "missing" if 'SUPABASE_URL' in missing else "present",
            "supabase_anon_key": "missing" if 'SUPABASE_ANON_KEY' in missing else "present",
        },
        "timestamp": datetime.now(timezone.utc).isoformat()
    }), 200


@main_bp.route('/api/scrape', methods=['POST'])
def scrape_article():
    """
    Extracts, summarizes, translates and stores the article at the given URL.
    Expects JSON body: {"url": "..."}
    """
    data = request.get_json(silent=True)
    scrape_service = current_app.extensions['scrape_service']

    try:
        result = scrape_service.scrape(data)
        return jsonify(result.to_response()), 200
    except ScraperError as e:
        current_app.logger.warning(f"Scrape failed [{e.error_code}]: {e.details}")
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        current_app.logger.error(f"Error scraping article: {e}", exc_info=True)
        return jsonify({
            "error": "Failed to scrape article",
            "error_code": ScraperError.error_code,
            "details": str(e),
        }), 500
