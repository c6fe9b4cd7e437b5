import logging

import uvicorn

from foodwaste.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    from foodwaste.api.api_run import app

    logging.getLogger("foodwaste_app").info("Serving on http://localhost:%d (Press CTRL+C to quit)", APP_PORT)
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
