"""Shared Jinja2 template environment."""

from fastapi.templating import Jinja2Templates

from genealogy.core.config import get_settings, resolve_path

templates = Jinja2Templates(directory=str(resolve_path(get_settings().template_dir)))
