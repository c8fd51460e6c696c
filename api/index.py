"""Vercel serverless entry point for PulseCheck."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from pulsecheck.config import PulseCheckConfig
from pulsecheck.web.app import create_app

app = create_app(pulse_config=PulseCheckConfig())
