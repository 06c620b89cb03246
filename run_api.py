"""Run the HTTP API from project root. Use: python run_api.py [--host HOST] [--port PORT]"""
import argparse

import uvicorn

parser = argparse.ArgumentParser(description="Job Tracker AI API server")
parser.add_argument("--host", default="127.0.0.1")
parser.add_argument("--port", type=int, default=8000)
parser.add_argument("--reload", action="store_true")
args = parser.parse_args()

uvicorn.run("job_tracker_ai.api:app", host=args.host, port=args.port, reload=args.reload)
