"""Local development entrypoint.

Exposes `app` for hosts that look for it in `main.py` without shadowing
the `lotto_viewer/` package.
"""

from lotto_viewer import create_app

app = create_app()


if __name__ == "__main__":
    # threaded: a second trigger must observe the in-flight fetch
    app.run(host="127.0.0.1", port=8000, debug=False, threaded=True)
