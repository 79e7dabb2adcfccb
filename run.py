#!/usr/bin/env python3
"""
Run the API with uvicorn after loading environment variables from .env
"""
import os
from pathlib import Path

from dotenv import load_dotenv
import uvicorn

env_path = Path(__file__).parent / ".env"
if env_path.exists():
    load_dotenv(env_path, override=True)
    print(f"✓ Environment loaded from {env_path}")
else:
    print(f"⚠ No .env file found at {env_path}")

host = os.getenv("HOST", "0.0.0.0")
port = int(os.getenv("PORT", "5000"))
debug = os.getenv("DEBUG", "False").lower() == "true"
reload = debug

if __name__ == "__main__":
    print(f"🚀 Starting server on http://{host}:{port}")
    print(f"   Debug: {debug}, Reload: {reload}")
    uvicorn.run(
        "src.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="debug" if debug else "info"
    )
