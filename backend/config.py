import os

from sqlalchemy.engine import URL


def _env_int(name, default):
    try:
        return int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


def database_uri():
    """Build the store URI from DATABASE_URL or the discrete DB_* variables."""
    if os.environ.get('DATABASE_URL'):
        return os.environ['DATABASE_URL']
    url = URL.create(
        'postgresql+psycopg2',
        username=os.environ.get('DB_USER'),
        password=os.environ.get('DB_PASSWORD'),
        host=os.environ.get('DB_SERVER') or 'localhost',
        port=_env_int('DB_PORT', 5432),
        database=os.environ.get('DB_DATABASE') or 'monopoly',
    )
    return url.render_as_string(hide_password=False)


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = _env_int('PORT', 3000)
