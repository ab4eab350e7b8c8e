import logging

import uvicorn
from menu.api.api_run import app
from menu.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    local_url = f"http://localhost:{APP_PORT}"
    logging.getLogger("menu_app").info("Menu recommender running on %s (Press CTRL+C to quit)", local_url)
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
