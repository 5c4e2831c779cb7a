"""Browser front-end for the shell.

This package provides a Flask application that exposes the shell over
HTTP.  It is an **optional** extra; install with::

    pip install bubble-os[web]

The ``create_app`` factory in ``app.py`` creates a shell and serves
four endpoints:

- ``GET /``: the terminal page.
- ``POST /api/execute``: run one command line and return JSON.
- ``GET /api/history``: the session's command history.
- ``GET /api/status``: shell name, version and working directory.
"""
