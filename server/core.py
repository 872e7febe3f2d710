from settings import settings as app_settings

# Upload limits shared across routes
MAX_FILE_SIZE = app_settings.MAX_FILE_SIZE
MIN_TEXT_LENGTH = app_settings.MIN_TEXT_LENGTH

ROUTE_MAP = {
    "generate": "POST /api/generate",
    "generateAudio": "POST /api/generate-audio",
    "health": "GET /api/health",
    "config": "GET /config",
}
