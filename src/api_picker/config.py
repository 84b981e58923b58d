import os

__version__ = "0.1.0"

REQUEST_TIMEOUT = float(os.getenv("API_PICKER_TIMEOUT", "30"))
USER_AGENT = os.getenv("API_PICKER_USER_AGENT", f"api-picker/{__version__}")
