#!/usr/bin/env python3
"""
Interactive Test Client for restservice

A simple command-line client for manually testing the REST service.

Usage:
    python scripts/client.py                  # Connect to localhost:8000
    python scripts/client.py --host 1.2.3.4   # Connect to specific host
    python scripts/client.py --port 8080      # Connect to specific port

Commands:
    get <key>            - GET /entry/<key>
    list                 - GET /list
    put <key> <value>    - PUT /entry/<key>/<value>
    welcome              - GET /
    help                 - Show this help
    exit                 - Exit client
"""

import argparse
from urllib.parse import quote

import httpx

# Enable command history with arrow keys (works on Unix systems)
try:
    import readline  # noqa: F401
except ImportError:
    pass  # readline not available on Windows by default


class RestClient:
    """Simple HTTP client for restservice."""

    def __init__(self, host: str, port: int, timeout: float = 5.0):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.http = httpx.Client(base_url=f"http://{host}:{port}", timeout=timeout)

    def close(self):
        self.http.close()

    def request(self, method: str, path: str) -> str:
        """Send one request and return "<status> <body>"."""
        try:
            response = self.http.request(method, path)
            return f"{response.status_code} {response.text}".rstrip()
        except httpx.TimeoutException:
            return "ERROR: Request timed out"
        except httpx.HTTPError as e:
            return f"ERROR: {e}"

    def get(self, key: str) -> str:
        return self.request("GET", f"/entry/{quote(key, safe='')}")

    def list(self) -> str:
        return self.request("GET", "/list")

    def put(self, key: str, value: str) -> str:
        return self.request("PUT", f"/entry/{quote(key, safe='')}/{quote(value, safe='')}")

    def welcome(self) -> str:
        return self.request("GET", "/")


def print_help():
    """Print help message."""
    print("""
restservice Commands:
---------------------
  get <key>            Retrieve the value for a key
  list                 List every entry
  put <key> <value>    Store a key-value pair
  welcome              Fetch the welcome page

Client Commands:
----------------
  help                 Show this help message
  exit                 Exit the client

Examples:
---------
  put color blue       Store "blue" under "color"
  get color            Get value for "color"
  list                 Show all entries
""")


def main():
    parser = argparse.ArgumentParser(
        description="Interactive test client for restservice"
    )
    parser.add_argument(
        "--host",
        type=str,
        default="localhost",
        help="Server host (default: localhost)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Server port (default: 8000)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=5.0,
        help="Request timeout in seconds (default: 5.0)"
    )

    args = parser.parse_args()

    print("restservice Client")
    print("==================")
    print(f"Talking to http://{args.host}:{args.port} (type 'help' for commands)\n")

    client = RestClient(args.host, args.port, args.timeout)

    try:
        while True:
            try:
                line = input(">>> ").strip()
            except EOFError:
                print("\nGoodbye!")
                break

            if not line:
                continue

            parts = line.split()
            command = parts[0].lower()

            if command == "help":
                print_help()
            elif command in ("exit", "quit"):
                print("Goodbye!")
                break
            elif command == "get" and len(parts) == 2:
                print(client.get(parts[1]))
            elif command == "list" and len(parts) == 1:
                print(client.list())
            elif command == "put" and len(parts) == 3:
                print(client.put(parts[1], parts[2]))
            elif command == "welcome" and len(parts) == 1:
                print(client.welcome())
            else:
                print("Unknown command. Type 'help' for usage.")

    except KeyboardInterrupt:
        print("\n\nInterrupted. Goodbye!")
    finally:
        client.close()


if __name__ == "__main__":
    main()
