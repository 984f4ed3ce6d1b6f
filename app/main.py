"""ASGI entry point.

Run with an ASGI server, e.g. ``uvicorn main:app``, from the ``app``
directory.
"""

import uvicorn

from server.server import create_app

app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
