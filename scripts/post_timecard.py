"""Utility script to exercise a running timecard service over HTTP."""

import argparse
import json
import pathlib

import requests


def post_timecard(base_url: str, request_path: pathlib.Path) -> bytes:
    with request_path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    response = requests.post(f"{base_url}/excel", json=payload, timeout=60)
    if response.status_code != 200:
        raise RuntimeError(f"{response.status_code}: {response.text}")
    return response.content


def main():
    parser = argparse.ArgumentParser(description="Post a timecard JSON file and save the returned workbook")
    parser.add_argument("request", type=pathlib.Path, help="JSON file shaped like the POST /excel body")
    parser.add_argument("--base-url", default="http://localhost:8080", help="Base URL of the timecard server")
    parser.add_argument("-o", "--output", type=pathlib.Path, default=pathlib.Path("Timecard.xlsx"))
    args = parser.parse_args()

    health = requests.get(f"{args.base_url}/health", timeout=10)
    print(f"Health: {health.status_code} {health.text}")

    content = post_timecard(args.base_url, args.request)
    args.output.write_bytes(content)
    print(f"Saved {len(content)} bytes to {args.output}")


if __name__ == "__main__":
    main()
