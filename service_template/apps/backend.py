"""Entrypoint for the backend service."""

from fastapi import FastAPI

from service_template import create_app
from service_template.services import BACKEND

app: FastAPI = create_app(BACKEND)
