# marketplace/main.py
import uvicorn

from marketplace.api import create_app
from marketplace.utils.settings import HOST, PORT

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
