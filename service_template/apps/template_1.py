"""Entrypoint for service template 1."""

from fastapi import FastAPI

from service_template import create_app
from service_template.services import TEMPLATE_1

app: FastAPI = create_app(TEMPLATE_1)
