"""API route handlers."""

from .applications import router as applications_router
from .assessments import router as assessments_router
from .rubric import router as rubric_router
