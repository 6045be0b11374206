import os
from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

FIGMA_API_KEY = os.getenv("FIGMA_API_KEY")
FIGMA_API_BASE = os.getenv("FIGMA_API_BASE", "https://api.figma.com/v1")
FIGMA_TIMEOUT = float(os.getenv("FIGMA_TIMEOUT", "30"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
