"""
Vercel serverless entry point.

@vercel/python detects the module-level ASGI `app`; vercel.json rewrites
/api/* here so FastAPI does the routing.
"""

import os
import sys

# Make the project root importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from quote_intake.main import app  # noqa: E402,F401
