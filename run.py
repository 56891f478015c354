import uvicorn

from catalog.config import APP_HOST, APP_PORT

if __name__ == '__main__':
    uvicorn.run("catalog.main:app", host=APP_HOST, port=APP_PORT, log_level="info")
