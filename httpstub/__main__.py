"""
httpstub Entry Point - Run with: python -m httpstub

Serves the canned routes on http://127.0.0.1:8080 in the foreground
until interrupted with Ctrl-C. Takes no options.
"""

import logging
import sys
import threading


def main():
    """Run a stub server until KeyboardInterrupt."""
    from httpstub.server.lifecycle import StubServer

    logging.basicConfig(level=logging.INFO, format='[%(asctime)s] %(message)s')
    server = StubServer()
    server.start()
    print(f"  Stub server: {server.base_url}  (Ctrl-C to stop)")
    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        print("\n  Shutting down...")
    finally:
        server.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
