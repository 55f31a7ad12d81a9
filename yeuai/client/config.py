import os
from typing import Optional
from dotenv import load_dotenv

# Load .env as soon as this module is imported (safe to call multiple times)
load_dotenv()

YEUAI_ACCESS_TOKEN: Optional[str] = os.getenv("YEUAI_ACCESS_TOKEN")
YEUAI_HOSTNAME: str = os.getenv("YEUAI_HOSTNAME", "nlp.yeu.ai")
YEUAI_ENDPOINT: str = os.getenv("YEUAI_ENDPOINT", "/api/v1")
YEUAI_SECURE: bool = os.getenv("YEUAI_SECURE", "1") == "1"
YEUAI_REQUEST_SOURCE: str = os.getenv("YEUAI_REQUEST_SOURCE", "python")
# unset -> wait forever on the tagger
YEUAI_TIMEOUT: Optional[float] = float(os.environ["YEUAI_TIMEOUT"]) if os.getenv("YEUAI_TIMEOUT") else None
