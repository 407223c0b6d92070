#!/usr/bin/env python3
"""
Generate a shift-work schedule from a JSON request file.

Usage: python3 generate_schedule.py <request_file.json>

This script reads a schedule request (preferences + shifts) from a JSON file
and outputs the generated schedule as JSON to stdout.

Security: This script only reads from the specified JSON file and writes
to stdout. It does not accept any code or commands as input.
"""

import json
import logging
import os
import sys

# Import shiftsleep modules (assumes api/_python is in path or script is run from there)
from shiftsleep.errors import ScheduleInputError
from shiftsleep.scheduler import generate_schedule_dict


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("SHIFTSLEEP_LOG_LEVEL", "WARNING"),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(sys.argv) != 2:
        print(json.dumps({"error": "Usage: generate_schedule.py <request_file.json>"}))
        sys.exit(1)

    request_file = sys.argv[1]

    try:
        with open(request_file) as f:
            data = json.load(f)

        print(json.dumps(generate_schedule_dict(data)))

    except FileNotFoundError:
        print(json.dumps({"error": f"Request file not found: {request_file}"}))
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON in request file: {e}"}))
        sys.exit(1)
    except ScheduleInputError as e:
        print(json.dumps({"error": f"Invalid request: {e}"}))
        sys.exit(1)
    except Exception as e:
        print(json.dumps({"error": f"Schedule generation failed: {e}"}))
        sys.exit(1)


if __name__ == "__main__":
    main()
