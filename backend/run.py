import logging
from dotenv import load_dotenv
load_dotenv()

from concierge import create_app

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = create_app()

if __name__ == "__main__":
    # threaded=True allows handling multiple concurrent requests
    app.run(host="0.0.0.0", port=5000, debug=True, threaded=True)
