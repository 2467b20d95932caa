import logging

from recipes_app.api import create_app
from recipes_app.core.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app(settings)

if __name__ == "__main__":
    print(f"{settings.APP_NAME} starting at http://{settings.HOST}:{settings.PORT}")
    import uvicorn
    # Serve the module-level app configured above
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL)
