"""Guidance blueprint: JSON endpoints over the guidance engine (stateless)."""

from flask import Blueprint

guidance_bp = Blueprint('guidance', __name__)

from . import routes  # noqa: E402,F401
