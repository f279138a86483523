"""ASGI entrypoint for the macro tracker API."""

import uvicorn

from macro_tracker.api.app import create_app
from macro_tracker.containers import build_container

app = create_app(build_container())


def main() -> None:
    """Serve the API with uvicorn for local development."""
    uvicorn.run("macro_tracker.api.asgi:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
