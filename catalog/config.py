from dotenv import load_dotenv
import os
from pathlib import Path

load_dotenv()


# -----------------------------------------------------------
# Общие параметры
# -----------------------------------------------------------
SQLALCHEMY_ECHO = True if os.environ.get('SQLALCHEMY_ECHO', 'false').lower() == 'true' else False
ROOT_DIR = Path(__file__).parent.parent
LOG_DIR = os.environ.get('LOG_DIR', os.path.join(ROOT_DIR, "log"))


# -----------------------------------------------------------
# Параметры подключения к основной базе данных PostgreSQL
# -----------------------------------------------------------
DB_FQDN_HOST = os.environ.get('DB_FQDN_HOST', 'localhost')
DB_PORT = int(os.environ.get('DB_PORT', 5432))
DB_NAME = os.environ.get('DB_NAME', 'catalog')
DB_USER = os.environ.get('DB_USER', 'catalog')
DB_PASSWORD = os.environ.get('DB_PASSWORD', '')
SSL_REQUIRED = True if os.environ.get('SSL_REQUIRED', 'false').lower() == 'true' else False
PROD_URI = "postgresql+psycopg://{}:{}@{}:{}/{}".format(
    DB_USER,
    DB_PASSWORD,
    DB_FQDN_HOST,
    DB_PORT,
    DB_NAME
)


# -----------------------------------------------------------
# Тестовая база данных
# -----------------------------------------------------------
TEST_URI = os.environ.get('TEST_URI', 'sqlite+aiosqlite://')


# -----------------------------------------------------------
# Тексты ответов
# -----------------------------------------------------------
NO_AUTHORS_FOUND = 'No authors found'
NO_BOOKS_FOUND = 'No books found'


# -----------------------------------------------------------
# Веб-сервер
# -----------------------------------------------------------
APP_HOST = os.environ.get('APP_HOST', '0.0.0.0')
APP_PORT = int(os.environ.get('APP_PORT', 8000))
