import argparse
import json
import sys
import time

import requests

from robot_cleaner.utils.consts import API_PREFIX, DEFAULT_SERVER_URL, MAX_RETRIES, RETRY_DELAY, TIMEOUT


def request_with_retries(method, url, **kwargs):
    """
    Sends an HTTP request, retrying on connection errors and 5xx responses.
    Returns the final response, or None if every attempt failed.
    """
    for attempt in range(1, MAX_RETRIES + 1):
        try:
            response = method(url, timeout=TIMEOUT, **kwargs)
            if response.status_code < 500:
                return response
            print(f"✗ Server error {response.status_code} (attempt {attempt}/{MAX_RETRIES})", file=sys.stderr)
        except requests.exceptions.RequestException as e:
            print(f"✗ HTTP request failed (attempt {attempt}/{MAX_RETRIES}): {e}", file=sys.stderr)

        if attempt < MAX_RETRIES:
            time.sleep(RETRY_DELAY)
    return None


def send_path(server_url, path_data):
    """
    Posts a path to the cleaner server.

    Args:
        server_url (str): Base URL of the server, e.g. 'http://localhost:5000'.
        path_data (dict): {"start": {"x": 0, "y": 0},
                           "commands": [{"direction": "north", "steps": 4}, ...]}
    """
    print(f"Sending {len(path_data.get('commands', []))} commands to {server_url}...")
    return request_with_retries(requests.post, f"{server_url}{API_PREFIX}/enter-path", json=path_data)


def fetch_report(server_url, report_id):
    print(f"Fetching execution report {report_id} from {server_url}...")
    return request_with_retries(requests.get, f"{server_url}{API_PREFIX}/enter-path/{report_id}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Send a cleaning path to the robot cleaner server.")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--file", help="JSON file with the path request body ('-' for stdin)")
    group.add_argument("--get", type=int, metavar="ID", help="Fetch a stored execution report")
    parser.add_argument("--server", default=DEFAULT_SERVER_URL, help="Server base URL")
    args = parser.parse_args(argv)

    server_url = args.server.rstrip("/")
    if args.get is not None:
        response = fetch_report(server_url, args.get)
    else:
        try:
            if args.file == "-":
                path_data = json.load(sys.stdin)
            else:
                with open(args.file) as f:
                    path_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Error: cannot read path file {args.file}: {e}", file=sys.stderr)
            return 2
        response = send_path(server_url, path_data)

    if response is None:
        print("✗ Giving up, server unreachable", file=sys.stderr)
        return 1

    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        # Not every error body is JSON
        print(response.text)
    return 0 if response.ok else 1


if __name__ == "__main__":
    sys.exit(main())
