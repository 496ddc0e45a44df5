"""ASGI entrypoint: uvicorn pesca_api.asgi:app"""

from pesca_api.main import create_app

app = create_app()
