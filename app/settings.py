# app/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

HOST = "0.0.0.0"
PORT = int(os.getenv("PORT", 3000))

API_KEY = "secret123"
API_KEY_HEADER = "x-api-key"
PRODUCTS_PREFIX = "/api/products"
