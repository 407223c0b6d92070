"""
Vercel Python Function for schedule generation.

This endpoint handles POST requests to /api/schedule/generate and returns
a shift-work sleep schedule based on the provided roster and preferences.
"""

from http.server import BaseHTTPRequestHandler
import json
import logging
import sys
from pathlib import Path
from uuid import uuid4

# Add the _python directory to the Python path for importing shiftsleep module
sys.path.insert(0, str(Path(__file__).parent.parent / "_python"))

from shiftsleep.errors import ScheduleInputError
from shiftsleep.scheduler import generate_schedule_dict

logger = logging.getLogger(__name__)


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_POST(self):
        """Handle POST requests for schedule generation."""
        try:
            # Read request body
            content_length = int(self.headers.get("Content-Length", 0))
            body = self.rfile.read(content_length)
            data = json.loads(body)

            result = {
                "id": str(uuid4()),
                "schedule": generate_schedule_dict(data),
            }

            self._send_json_response(200, result)

        except json.JSONDecodeError:
            self._send_json_response(400, {"error": "Invalid JSON in request body"})
        except ScheduleInputError as e:
            self._send_json_response(400, {"error": str(e)})
        except Exception as e:
            logger.exception("Schedule generation failed")
            self._send_json_response(
                500, {"error": f"Schedule generation failed: {str(e)}"}
            )

    def _send_json_response(self, status_code: int, data: dict):
        """Send a JSON response with the given status code."""
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def do_OPTIONS(self):
        """Handle CORS preflight requests."""
        self.send_response(200)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()
