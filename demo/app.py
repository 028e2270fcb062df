import os
from flask import Flask

app = Flask(__name__)

GREETING = "Hello from Flask on EKS! 🚀"
VERSION_INFO = "Flask EKS Demo Application v1.0.0"

TEXT_PLAIN = {"Content-Type": "text/plain; charset=utf-8"}


# --- Runtime Configuration ---
def get_port():
    """Reads the listening port from the PORT environment variable."""
    raw = os.environ.get('PORT', '8080')
    try:
        return int(raw)
    except ValueError:
        app.logger.error(f"Invalid PORT value: {raw!r}")
        raise


def get_host():
    return os.environ.get('HOST', '0.0.0.0')


@app.route('/')
def home():
    """Returns the fixed greeting."""
    return GREETING, 200, TEXT_PLAIN


@app.route('/health')
def health():
    """Liveness probe for the orchestrator."""
    return "OK", 200, TEXT_PLAIN


@app.route('/info')
def info():
    return VERSION_INFO, 200, TEXT_PLAIN


def main():
    host = get_host()
    port = get_port()
    app.logger.info(f"Starting demo app on {host}:{port}")
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
