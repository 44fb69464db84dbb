import logging

import uvicorn
from mealmate.api.api_run import app
from mealmate.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from mealmate.utilities.network import get_lan_url


if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    local_url = f"http://localhost:{APP_PORT}"
    lan_url = get_lan_url(APP_PORT)
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    # Other devices on the same network can use the LAN URL
    if lan_url:
        print(f"Accessible from other devices at: {lan_url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
