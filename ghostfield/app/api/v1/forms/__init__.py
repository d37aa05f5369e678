"""Forms API module - protected contact form endpoints."""
from ghostfield.app.api.v1.forms.routes import router as forms_router

__all__ = ["forms_router"]
