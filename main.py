import logging
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from config import LOG_LEVEL
from controllers.contact.contact_controller import http_exception_handler, router as contact_router

logging.basicConfig(level=LOG_LEVEL)

app = FastAPI()

app.include_router(contact_router)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)

@app.get("/")
def read_root():
    return {"message": "API is running."}
