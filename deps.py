"""Centralized imports for the entire project (app + baseline_checker)."""

# Standard library
import html
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

# External
from fastapi import (
    APIRouter,
    Form,
    HTTPException,
)
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, Response
from openai import OpenAI
