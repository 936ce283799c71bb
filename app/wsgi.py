"""
WSGI compatibility layer.

Wraps the ASGI FastAPI application for WSGI servers such as Gunicorn
or Waitress. The lifespan hook does not run under WSGI, so tables are
created here before the first request.
"""

from a2wsgi import ASGIMiddleware

from app.infrastructure.board.database import init_database
from app.interfaces.board.dependencies import get_engine
from app.main import app

init_database(get_engine())

application = ASGIMiddleware(app)
