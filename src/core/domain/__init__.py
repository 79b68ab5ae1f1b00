"""
Domain models and value objects.

Contains the Polynomial value type and its string rendering.
"""

from src.core.domain.polynomial import DEFAULT_INDETERMINATE, Polynomial
from src.core.domain.rendering import (
    DEFAULT_RENDER_CONFIG,
    RenderConfig,
    describe_polynomial,
    format_coefficient,
    format_term,
    render,
    render_coefficients,
)

__all__ = [
    # Polynomial model
    "DEFAULT_INDETERMINATE",
    "Polynomial",
    # Rendering
    "DEFAULT_RENDER_CONFIG",
    "RenderConfig",
    "describe_polynomial",
    "format_coefficient",
    "format_term",
    "render",
    "render_coefficients",
]
