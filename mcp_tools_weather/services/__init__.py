from .forecast import get_forecast_text  # noqa: F401
